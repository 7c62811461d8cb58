"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, response shapes)
    - No schema accepts an owner field; ownership comes from the verified token
"""
