"""Infrastructure Layer — database sessions, repositories and logging setup.

Invariants:
    - Store exceptions never leave this layer unmapped (DatabaseError)
"""
