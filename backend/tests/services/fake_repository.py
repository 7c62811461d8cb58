"""In-memory ExpenseRepository — records every call so tests can assert store access.

Invariants:
    - Same owner scoping as the SQL repository: id AND owner must match
    - Ids are assigned sequentially from 1 and never reused
    - fail_with, when set, is raised by every method instead of touching data
"""

from app.core.domain_types import ExpenseFields, ExpenseId, ExpenseRecord, UserId


class FakeExpenseRepository:
    def __init__(self):
        self.rows: dict[int, ExpenseRecord] = {}
        self.calls: list[tuple] = []
        self.fail_with: Exception | None = None
        self._next_id = 1

    def _record_call(self, *call):
        self.calls.append(call)
        if self.fail_with is not None:
            raise self.fail_with

    async def list_for_owner(self, owner_id: UserId) -> list[ExpenseRecord]:
        self._record_call("list", owner_id)
        return sorted(
            (r for r in self.rows.values() if r.user_id == owner_id),
            key=lambda r: r.id,
        )

    async def create(
        self, owner_id: UserId, fields: ExpenseFields,
    ) -> ExpenseRecord:
        self._record_call("create", owner_id, fields)
        record = ExpenseRecord(
            id=ExpenseId(self._next_id),
            user_id=owner_id,
            amount=fields.amount,
            category=fields.category,
            description=fields.description,
        )
        self._next_id += 1
        self.rows[record.id] = record
        return record

    async def update_owned(
        self, expense_id: ExpenseId, owner_id: UserId, fields: ExpenseFields,
    ) -> ExpenseRecord | None:
        self._record_call("update", expense_id, owner_id, fields)
        existing = self.rows.get(expense_id)
        if existing is None or existing.user_id != owner_id:
            return None
        record = ExpenseRecord(
            id=existing.id,
            user_id=existing.user_id,
            amount=fields.amount,
            category=fields.category,
            description=fields.description,
        )
        self.rows[expense_id] = record
        return record

    async def delete_owned(
        self, expense_id: ExpenseId, owner_id: UserId,
    ) -> ExpenseRecord | None:
        self._record_call("delete", expense_id, owner_id)
        existing = self.rows.get(expense_id)
        if existing is None or existing.user_id != owner_id:
            return None
        return self.rows.pop(expense_id)
