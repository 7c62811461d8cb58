"""Boundary Protocols — contracts between the expense service and persistence.

Invariants:
    - Every method takes the owner explicitly; there is no unscoped read or write
    - update_owned/delete_owned return None when no row matches id AND owner
    - Implementations raise DatabaseError (core/errors.py) for store failures

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from app.core.domain_types import ExpenseFields, ExpenseId, ExpenseRecord, UserId


class ExpenseRepository(Protocol):
    """Contract for owner-scoped expense persistence — implemented by infrastructure."""
    async def list_for_owner(self, owner_id: UserId) -> list[ExpenseRecord]: ...
    async def create(
        self, owner_id: UserId, fields: ExpenseFields,
    ) -> ExpenseRecord: ...
    async def update_owned(
        self, expense_id: ExpenseId, owner_id: UserId, fields: ExpenseFields,
    ) -> ExpenseRecord | None: ...
    async def delete_owned(
        self, expense_id: ExpenseId, owner_id: UserId,
    ) -> ExpenseRecord | None: ...
