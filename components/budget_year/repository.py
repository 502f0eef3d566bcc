"""Repository for budget year operations."""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget_year import schemas
from components.budget_year.models import BudgetYear
from components.plan.models import Plan

logger = logging.getLogger(__name__)


class BudgetYearRepository:
    """Repository for budget year operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_all(self) -> List[BudgetYear]:
        """Get all budget years, newest first."""
        result = await self.session.execute(
            select(BudgetYear).order_by(BudgetYear.name.desc())
        )
        return list(result.scalars().all())

    async def get_by_id(self, budget_year_id: int) -> Optional[BudgetYear]:
        result = await self.session.execute(
            select(BudgetYear).where(BudgetYear.id == budget_year_id)
        )
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[BudgetYear]:
        result = await self.session.execute(
            select(BudgetYear).where(BudgetYear.name == name)
        )
        return result.scalar_one_or_none()

    async def get_active(self) -> Optional[BudgetYear]:
        result = await self.session.execute(
            select(BudgetYear).where(BudgetYear.is_active.is_(True)).limit(1)
        )
        return result.scalar_one_or_none()

    async def _deactivate_others(self, budget_year_id: Optional[int]) -> None:
        query = update(BudgetYear).where(BudgetYear.is_active.is_(True)).values(is_active=False)
        if budget_year_id is not None:
            query = query.where(BudgetYear.id != budget_year_id)
        await self.session.execute(query)

    async def create(self, budget_year: schemas.BudgetYearCreate) -> BudgetYear:
        """Create a budget year; an active one deactivates all others."""
        if budget_year.is_active:
            await self._deactivate_others(None)

        db_budget_year = BudgetYear(**budget_year.model_dump())
        self.session.add(db_budget_year)
        await self.session.commit()
        await self.session.refresh(db_budget_year)
        return db_budget_year

    async def update(self, budget_year_id: int, budget_year: schemas.BudgetYearCreate) -> Optional[BudgetYear]:
        db_budget_year = await self.get_by_id(budget_year_id)
        if not db_budget_year:
            return None

        if budget_year.is_active:
            await self._deactivate_others(budget_year_id)
        for field, value in budget_year.model_dump().items():
            setattr(db_budget_year, field, value)
        await self.session.commit()
        await self.session.refresh(db_budget_year)
        return db_budget_year

    async def activate(self, budget_year_id: int) -> Optional[BudgetYear]:
        """Make one budget year the only active one."""
        db_budget_year = await self.get_by_id(budget_year_id)
        if not db_budget_year:
            return None

        await self._deactivate_others(budget_year_id)
        db_budget_year.is_active = True
        await self.session.commit()
        await self.session.refresh(db_budget_year)
        logger.info("Budget year %s is now active", db_budget_year.name)
        return db_budget_year

    async def delete(self, budget_year_id: int) -> bool:
        db_budget_year = await self.get_by_id(budget_year_id)
        if not db_budget_year:
            return False

        await self.session.delete(db_budget_year)
        await self.session.commit()
        return True

    async def has_plans(self, budget_year_id: int) -> bool:
        result = await self.session.execute(
            select(Plan.id).where(Plan.budget_year_id == budget_year_id).limit(1)
        )
        return result.scalar_one_or_none() is not None
