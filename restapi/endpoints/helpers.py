"""Shared helpers for the dashboard and report endpoints."""

from datetime import date
from typing import Optional, Tuple

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget_year.models import BudgetYear
from components.budget_year.repository import BudgetYearRepository
from components.finance.period import DateRange, budget_year_number, resolve_date_range


async def resolve_period(
    db: AsyncSession,
    budget_year_id: Optional[int],
    month: Optional[str],
    start_date: Optional[date],
    end_date: Optional[date],
) -> Tuple[BudgetYear, DateRange]:
    """
    Resolve the budget year and reporting period of a request.

    Falls back to the active budget year. The calendar year comes from the
    budget year name ("TA 2024/2025" -> 2024), or its start date.
    """
    repo = BudgetYearRepository(db)
    budget_year = await (repo.get_by_id(budget_year_id) if budget_year_id else repo.get_active())
    if budget_year is None:
        raise HTTPException(status_code=404, detail="Budget year not found")

    year = budget_year_number(budget_year.name) or budget_year.start_date.year
    period = resolve_date_range(year, month, start_date, end_date)
    if not period.is_valid:
        raise HTTPException(status_code=400, detail=period.error.value)
    return budget_year, period
