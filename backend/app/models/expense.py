"""Expense ORM — one row per expense, owned by exactly one user.

Invariants:
    - id is an autoincrement integer primary key assigned by the store
    - user_id is non-nullable and indexed; every query filters on it
    - amount is NUMERIC(12, 2) read back as float

Design Decisions:
    - No ForeignKey to users: the users table belongs to the external
      registration service and may live in another schema
"""

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.core.domain_types import ExpenseId, ExpenseRecord, UserId


class Expense(Base):
    __tablename__ = "expenses"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True,
    )
    amount: Mapped[float] = mapped_column(
        Numeric(12, 2, asdecimal=False), nullable=False,
    )
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )

    def to_record(self) -> ExpenseRecord:
        return ExpenseRecord(
            id=ExpenseId(self.id),
            user_id=UserId(self.user_id),
            amount=self.amount,
            category=self.category,
            description=self.description,
        )
