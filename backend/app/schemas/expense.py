"""Expense Schemas — request bodies and response shapes for /expenses.

Invariants:
    - ExpenseWrite: amount is a finite, non-boolean number (no range check), category is
      1-50 chars after stripping, description is optional and at most 255 chars
    - ExpenseWrite ignores unknown keys, so a client-sent user_id is dropped
    - ExpenseResponse mirrors the stored record including owner and id
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.domain_types import ExpenseFields, ExpenseRecord


class ExpenseWrite(BaseModel):
    """Body for create and update — full replacement of the editable fields."""
    model_config = ConfigDict(extra="ignore")

    amount: float
    category: str = Field(max_length=50)
    description: str | None = Field(None, max_length=255)

    @field_validator("amount", mode="before")
    @classmethod
    def amount_is_not_boolean(cls, v):
        # float would otherwise accept true/false as 1.0/0.0
        if isinstance(v, bool):
            raise ValueError("amount must be a number")
        return v

    @field_validator("amount")
    @classmethod
    def amount_is_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("amount must be a finite number")
        return v

    @field_validator("category")
    @classmethod
    def strip_category(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("category cannot be empty or whitespace")
        return v

    def to_fields(self) -> ExpenseFields:
        return ExpenseFields(
            amount=self.amount,
            category=self.category,
            description=self.description,
        )


class ExpenseResponse(BaseModel):
    """Expense as returned to its owner."""
    id: int
    user_id: int
    amount: float
    category: str
    description: str | None = None

    @classmethod
    def from_record(cls, record: ExpenseRecord) -> "ExpenseResponse":
        return cls(
            id=record.id,
            user_id=record.user_id,
            amount=record.amount,
            category=record.category,
            description=record.description,
        )


class DeleteConfirmation(BaseModel):
    message: str = "Expense deleted successfully"
