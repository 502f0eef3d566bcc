"""Transaction endpoints for the API."""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.core.schemas import FlowType
from components.finance.period import validate_date_range
from components.transaction import schemas
from components.transaction.repository import TransactionRepository
from components.user.models import User
from restapi.endpoints.auth import get_current_user

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[schemas.Transaction])
async def read_transactions(
    start_date: Optional[date] = Query(None, description="Transactions on or after this date"),
    end_date: Optional[date] = Query(None, description="Transactions on or before this date"),
    type: Optional[FlowType] = Query(None, description="Only income or only expense"),
    plan_id: Optional[int] = Query(None, description="Only transactions of this plan"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get transactions in chronological order."""
    if not validate_date_range(start_date, end_date):
        raise HTTPException(status_code=400, detail="start_date must not be after end_date")
    return await TransactionRepository(db).get_all(start_date, end_date, type, plan_id)


@router.get("/{transaction_id}", response_model=schemas.Transaction)
async def read_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a specific transaction by ID."""
    transaction = await TransactionRepository(db).get_by_id(transaction_id)
    if transaction is None:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction


async def _check_plan(repo: TransactionRepository, transaction: schemas.TransactionCreate) -> None:
    if transaction.plan_id is not None and not await repo.plan_exists(transaction.plan_id):
        raise HTTPException(status_code=400, detail=f"Plan {transaction.plan_id} does not exist")


@router.post("/", response_model=schemas.Transaction)
async def create_transaction(
    transaction: schemas.TransactionCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Record a transaction. The amount is computed from the ekuivalen."""
    repo = TransactionRepository(db)
    await _check_plan(repo, transaction)
    return await repo.create(transaction)


@router.put("/{transaction_id}", response_model=schemas.Transaction)
async def update_transaction(
    transaction_id: int,
    transaction: schemas.TransactionCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update a transaction and recompute its amount."""
    repo = TransactionRepository(db)
    await _check_plan(repo, transaction)
    updated = await repo.update(transaction_id, transaction)
    if not updated:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return updated


@router.delete("/{transaction_id}")
async def delete_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete a transaction."""
    if not await TransactionRepository(db).delete(transaction_id):
        raise HTTPException(status_code=404, detail="Transaction not found")
    return {"message": "Transaction deleted successfully"}
