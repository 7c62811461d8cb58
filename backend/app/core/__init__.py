"""Core Layer — domain types, errors and credential verification. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
"""
