"""Service Layer — expense operations scoped to an authenticated user."""
