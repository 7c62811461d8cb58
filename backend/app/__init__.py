"""Expense Tracker API — authenticated, owner-scoped expense records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
