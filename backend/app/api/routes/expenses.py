"""Expense Routes — owner-scoped CRUD over /expenses.

Invariants:
    - Every route depends on require_identity; it runs before any DB session is opened
    - The owner passed to the service is the verified identity, never body or path input
    - Update and delete answer 404 for both missing and foreign records
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import CurrentUser, require_identity
from app.core.domain_types import ExpenseId
from app.infrastructure.database import get_db
from app.infrastructure.expense_repository import SqlAlchemyExpenseRepository
from app.schemas.expense import DeleteConfirmation, ExpenseResponse, ExpenseWrite
from app.services.expense_service import ExpenseService

router = APIRouter(
    prefix="/expenses",
    tags=["expenses"],
    dependencies=[Depends(require_identity)],
)


def get_expense_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ExpenseService:
    return ExpenseService(SqlAlchemyExpenseRepository(db))


Service = Annotated[ExpenseService, Depends(get_expense_service)]


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(user: CurrentUser, service: Service):
    """All of the requester's expenses, oldest id first."""
    records = await service.list_expenses(user)
    return [ExpenseResponse.from_record(r) for r in records]


@router.post("", response_model=ExpenseResponse)
async def create_expense(body: ExpenseWrite, user: CurrentUser, service: Service):
    record = await service.create_expense(user, body.to_fields())
    return ExpenseResponse.from_record(record)


@router.patch("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: int, body: ExpenseWrite, user: CurrentUser, service: Service,
):
    record = await service.update_expense(
        user, ExpenseId(expense_id), body.to_fields(),
    )
    return ExpenseResponse.from_record(record)


@router.delete("/{expense_id}", response_model=DeleteConfirmation)
async def delete_expense(expense_id: int, user: CurrentUser, service: Service):
    await service.delete_expense(user, ExpenseId(expense_id))
    return DeleteConfirmation()
