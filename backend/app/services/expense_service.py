"""Expense Service — list, create, update and delete scoped to the requester.

Invariants:
    - The owner is always AuthenticatedUser.user_id, never client input
    - update/delete raise ExpenseNotFoundError when no row matches id AND owner
    - Ids outside the stored key range are not found without a store round-trip
    - Store failures propagate as DatabaseError from the repository untouched

Design Decisions:
    - Service depends on the ExpenseRepository protocol, so route tests can
      swap in an in-memory fake through dependency_overrides
"""

import logging

from app.core.domain_types import (
    AuthenticatedUser, ExpenseFields, ExpenseId, ExpenseRecord,
    is_storable_expense_id,
)
from app.core.errors import ErrorContext, ExpenseNotFoundError
from app.core.repository_protocols import ExpenseRepository

logger = logging.getLogger(__name__)


class ExpenseService:
    """Owner-scoped expense operations."""

    def __init__(self, repository: ExpenseRepository):
        self.repository = repository

    async def list_expenses(self, user: AuthenticatedUser) -> list[ExpenseRecord]:
        return await self.repository.list_for_owner(user.user_id)

    async def create_expense(
        self, user: AuthenticatedUser, fields: ExpenseFields,
    ) -> ExpenseRecord:
        record = await self.repository.create(user.user_id, fields)
        logger.info(
            f"Expense {record.id} created",
            extra={"user_id": user.user_id, "expense_id": record.id},
        )
        return record

    async def update_expense(
        self,
        user: AuthenticatedUser,
        expense_id: ExpenseId,
        fields: ExpenseFields,
    ) -> ExpenseRecord:
        if not is_storable_expense_id(expense_id):
            raise ExpenseNotFoundError(
                expense_id, ErrorContext(user_id=user.user_id),
            )
        record = await self.repository.update_owned(
            expense_id, user.user_id, fields,
        )
        if record is None:
            raise ExpenseNotFoundError(
                expense_id, ErrorContext(user_id=user.user_id),
            )
        logger.info(
            f"Expense {expense_id} updated",
            extra={"user_id": user.user_id, "expense_id": expense_id},
        )
        return record

    async def delete_expense(
        self, user: AuthenticatedUser, expense_id: ExpenseId,
    ) -> None:
        if not is_storable_expense_id(expense_id):
            raise ExpenseNotFoundError(
                expense_id, ErrorContext(user_id=user.user_id),
            )
        record = await self.repository.delete_owned(expense_id, user.user_id)
        if record is None:
            raise ExpenseNotFoundError(
                expense_id, ErrorContext(user_id=user.user_id),
            )
        logger.info(
            f"Expense {expense_id} deleted",
            extra={"user_id": user.user_id, "expense_id": expense_id},
        )
