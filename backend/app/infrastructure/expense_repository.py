"""Expense Repository — SQLAlchemy implementation of the owner-scoped ExpenseRepository.

Invariants:
    - Every statement filters by user_id; update/delete also filter by id
    - Update and delete are single UPDATE/DELETE ... RETURNING statements,
      so "not found" and "not owned" are the same empty result
    - Each write commits before returning
    - SQLAlchemyError → rollback, log with traceback, raise DatabaseError
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ExpenseFields, ExpenseId, ExpenseRecord, UserId
from app.core.errors import DatabaseError, ErrorContext
from app.models.expense import Expense

logger = logging.getLogger(__name__)


class SqlAlchemyExpenseRepository:
    """Owner-scoped expense persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_owner(self, owner_id: UserId) -> list[ExpenseRecord]:
        async with self._guard("list", owner_id):
            result = await self.db.execute(
                select(Expense)
                .where(Expense.user_id == owner_id)
                .order_by(Expense.id.asc()),
            )
            return [row.to_record() for row in result.scalars().all()]

    async def create(
        self, owner_id: UserId, fields: ExpenseFields,
    ) -> ExpenseRecord:
        async with self._guard("create", owner_id):
            expense = Expense(
                user_id=owner_id,
                amount=fields.amount,
                category=fields.category,
                description=fields.description,
            )
            self.db.add(expense)
            await self.db.commit()
            await self.db.refresh(expense)
            return expense.to_record()

    async def update_owned(
        self, expense_id: ExpenseId, owner_id: UserId, fields: ExpenseFields,
    ) -> ExpenseRecord | None:
        async with self._guard("update", owner_id, expense_id):
            result = await self.db.execute(
                update(Expense)
                .where(Expense.id == expense_id, Expense.user_id == owner_id)
                .values(
                    amount=fields.amount,
                    category=fields.category,
                    description=fields.description,
                )
                .returning(Expense),
            )
            row = result.scalar_one_or_none()
            record = row.to_record() if row else None
            await self.db.commit()
            return record

    async def delete_owned(
        self, expense_id: ExpenseId, owner_id: UserId,
    ) -> ExpenseRecord | None:
        async with self._guard("delete", owner_id, expense_id):
            result = await self.db.execute(
                delete(Expense)
                .where(Expense.id == expense_id, Expense.user_id == owner_id)
                .returning(Expense),
            )
            row = result.scalar_one_or_none()
            record = row.to_record() if row else None
            await self.db.commit()
            return record

    @asynccontextmanager
    async def _guard(
        self,
        operation: str,
        owner_id: UserId,
        expense_id: ExpenseId | None = None,
    ) -> AsyncIterator[None]:
        """Map store failures to DatabaseError after rolling back."""
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Expense {operation} failed: {e}",
                exc_info=True,
                extra={
                    "operation": operation,
                    "user_id": owner_id,
                    "expense_id": expense_id,
                },
            )
            raise DatabaseError(
                operation,
                ErrorContext(user_id=owner_id, expense_id=expense_id),
            ) from e
