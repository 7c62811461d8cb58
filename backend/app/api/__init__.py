"""API Layer — FastAPI routes, the authentication gate and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes stay thin and delegate to services
"""
