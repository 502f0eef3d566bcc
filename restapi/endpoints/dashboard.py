"""Dashboard endpoints for the API."""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.finance.schemas import Activity, PeriodSummary
from components.report.repository import ReportRepository
from components.user.models import User
from restapi.endpoints.auth import get_current_user
from restapi.endpoints.helpers import resolve_period

router = APIRouter(
    prefix="/dashboard",
    tags=["dashboard"],
    responses={404: {"description": "Not found"}},
)


@router.get("/summary", response_model=PeriodSummary)
async def get_summary(
    budget_year_id: Optional[int] = Query(None, description="Budget year, defaults to the active one"),
    month: Optional[str] = Query(None, description="Month 1-12 or 'all'"),
    start_date: Optional[date] = Query(None, description="Explicit period start, needs end_date"),
    end_date: Optional[date] = Query(None, description="Explicit period end, needs start_date"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get dashboard totals for a period.

    Returns:
    - Planned income and expense of the budget year
    - Realized income and expense in the period
    - Net balance (realized income minus realized expense)
    - Planned and realized totals per category

    An explicit start/end date pair takes precedence over the month.
    """
    budget_year, period = await resolve_period(db, budget_year_id, month, start_date, end_date)
    return await ReportRepository(db).summary(budget_year.id, period)


@router.get("/recent-activities", response_model=List[Activity])
async def get_recent_activities(
    limit: int = Query(5, ge=1, le=50, description="Number of entries"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Latest recorded transactions and plans, newest first."""
    return await ReportRepository(db).recent_activities(limit)
