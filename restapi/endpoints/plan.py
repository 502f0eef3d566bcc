"""Plan endpoints for the API."""

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget_year.repository import BudgetYearRepository
from components.category.repository import CategoryRepository
from components.core.init_db import get_db
from components.finance.schemas import Realization
from components.plan import schemas
from components.plan.repository import PlanRepository
from components.user.models import User
from restapi.endpoints.auth import get_current_user

router = APIRouter(
    prefix="/plans",
    tags=["plans"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[schemas.Plan])
async def read_plans(
    budget_year_id: Optional[int] = Query(None, description="Only plans of this budget year"),
    category_id: Optional[int] = Query(None, description="Only plans of this category"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get plans with their category and budget year."""
    return await PlanRepository(db).get_all(budget_year_id, category_id)


@router.get("/realization", response_model=List[Realization])
async def read_realization(
    budget_year_id: int = Query(..., description="Budget year to compute"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Compute realization of every plan in a budget year.

    Returns per plan:
    - Planned amount
    - Total realized (only transactions matching the category kind)
    - Percentage realized, 2 decimals
    - Remaining budget, negative on overrun

    The figures are also cached on the plans; a failing cache write does
    not affect the response.
    """
    return await PlanRepository(db).refresh_realization(budget_year_id)


@router.get("/{plan_id}", response_model=schemas.Plan)
async def read_plan(
    plan_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a specific plan by ID."""
    plan = await PlanRepository(db).get_by_id(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Plan not found")
    return plan


async def _check_references(db: AsyncSession, plan: schemas.PlanCreate) -> None:
    if not await BudgetYearRepository(db).get_by_id(plan.budget_year_id):
        raise HTTPException(status_code=400, detail=f"Budget year {plan.budget_year_id} does not exist")
    if not await CategoryRepository(db).get_by_id(plan.category_id):
        raise HTTPException(status_code=400, detail=f"Category {plan.category_id} does not exist")


@router.post("/", response_model=schemas.Plan)
async def create_plan(
    plan: schemas.PlanCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Create a plan. The planned amount is computed from the ekuivalen."""
    await _check_references(db, plan)
    return await PlanRepository(db).create(plan)


@router.put("/{plan_id}", response_model=schemas.Plan)
async def update_plan(
    plan_id: int,
    plan: schemas.PlanCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update a plan and recompute its planned amount."""
    await _check_references(db, plan)
    updated = await PlanRepository(db).update(plan_id, plan)
    if not updated:
        raise HTTPException(status_code=404, detail="Plan not found")
    return updated


@router.delete("/{plan_id}")
async def delete_plan(
    plan_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete a plan. Its transactions become unlinked."""
    if not await PlanRepository(db).delete(plan_id):
        raise HTTPException(status_code=404, detail="Plan not found")
    return {"message": "Plan deleted successfully"}
