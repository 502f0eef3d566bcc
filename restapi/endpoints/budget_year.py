"""Budget year endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget_year import schemas
from components.budget_year.repository import BudgetYearRepository
from components.core.init_db import get_db
from components.user.models import User
from restapi.endpoints.auth import get_current_user

router = APIRouter(
    prefix="/budget-years",
    tags=["budget years"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[schemas.BudgetYear])
async def read_budget_years(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get all budget years, newest first."""
    return await BudgetYearRepository(db).get_all()


@router.get("/active", response_model=schemas.BudgetYear)
async def read_active_budget_year(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get the active budget year."""
    budget_year = await BudgetYearRepository(db).get_active()
    if budget_year is None:
        raise HTTPException(status_code=404, detail="No active budget year")
    return budget_year


@router.post("/", response_model=schemas.BudgetYear)
async def create_budget_year(
    budget_year: schemas.BudgetYearCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Create a budget year. Creating an active one deactivates the others."""
    repo = BudgetYearRepository(db)
    if await repo.get_by_name(budget_year.name):
        raise HTTPException(status_code=400, detail="Budget year with this name already exists")
    return await repo.create(budget_year)


@router.put("/{budget_year_id}", response_model=schemas.BudgetYear)
async def update_budget_year(
    budget_year_id: int,
    budget_year: schemas.BudgetYearCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update a budget year."""
    repo = BudgetYearRepository(db)
    existing = await repo.get_by_name(budget_year.name)
    if existing and existing.id != budget_year_id:
        raise HTTPException(status_code=400, detail="Budget year name is already taken")

    updated = await repo.update(budget_year_id, budget_year)
    if not updated:
        raise HTTPException(status_code=404, detail="Budget year not found")
    return updated


@router.post("/{budget_year_id}/activate", response_model=schemas.BudgetYear)
async def activate_budget_year(
    budget_year_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Make a budget year the only active one."""
    budget_year = await BudgetYearRepository(db).activate(budget_year_id)
    if not budget_year:
        raise HTTPException(status_code=404, detail="Budget year not found")
    return budget_year


@router.delete("/{budget_year_id}")
async def delete_budget_year(
    budget_year_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete a budget year without plans."""
    repo = BudgetYearRepository(db)
    if await repo.has_plans(budget_year_id):
        raise HTTPException(status_code=400, detail="Budget year still has plans")
    if not await repo.delete(budget_year_id):
        raise HTTPException(status_code=404, detail="Budget year not found")
    return {"message": "Budget year deleted successfully"}
