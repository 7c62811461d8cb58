"""Domain Types — identity and value types shared by the gate, services and repository.

Invariants:
    - UserId and ExpenseId wrap ints — store-assigned integer keys
    - AuthenticatedUser is frozen: once the gate verifies a token, nothing rewrites it
    - ExpenseFields carries client input only; it has no owner field

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
ExpenseId = NewType("ExpenseId", int)

# expenses.id is a 32-bit SERIAL; nothing outside this range can exist
MAX_EXPENSE_ID = 2**31 - 1


def is_storable_expense_id(expense_id: int) -> bool:
    return 1 <= expense_id <= MAX_EXPENSE_ID


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity embedded in a verified credential."""
    user_id: UserId
    username: str | None = None


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class ExpenseFields:
    """Client-supplied expense attributes for create and update."""
    amount: float
    category: str
    description: str | None = None


@dataclass(frozen=True)
class ExpenseRecord:
    """A stored expense as read back from the repository."""
    id: ExpenseId
    user_id: UserId
    amount: float
    category: str
    description: str | None
