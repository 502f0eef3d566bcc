"""Repository for plan operations."""

import logging
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from components.finance.ekuivalen import compute_amount
from components.finance.realization import aggregate_many
from components.finance.schemas import Realization
from components.plan import schemas
from components.plan.models import Plan
from components.transaction.repository import TransactionRepository

logger = logging.getLogger(__name__)

# Largest value Plan.percent_realized (Numeric(15, 2)) can hold
MAX_CACHED_PERCENT = 9_999_999_999_999.99


class PlanRepository:
    """Repository for plan operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    @staticmethod
    def _query():
        return select(Plan).options(
            selectinload(Plan.category),
            selectinload(Plan.budget_year),
        )

    async def get_all(
        self,
        budget_year_id: Optional[int] = None,
        category_id: Optional[int] = None,
    ) -> List[schemas.Plan]:
        """Get plans ordered by start date, with category and budget year."""
        query = self._query().order_by(Plan.start_date, Plan.id)
        if budget_year_id is not None:
            query = query.where(Plan.budget_year_id == budget_year_id)
        if category_id is not None:
            query = query.where(Plan.category_id == category_id)

        result = await self.session.execute(query)
        return [schemas.Plan.model_validate(row) for row in result.scalars().all()]

    async def get_recent(self, limit: int = 5) -> List[schemas.Plan]:
        result = await self.session.execute(
            self._query().order_by(Plan.created_at.desc(), Plan.id.desc()).limit(limit)
        )
        return [schemas.Plan.model_validate(row) for row in result.scalars().all()]

    async def _get_model(self, plan_id: int) -> Optional[Plan]:
        result = await self.session.execute(
            self._query()
            .where(Plan.id == plan_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, plan_id: int) -> Optional[schemas.Plan]:
        db_plan = await self._get_model(plan_id)
        return schemas.Plan.model_validate(db_plan) if db_plan else None

    @staticmethod
    def _apply(db_plan: Plan, plan: schemas.PlanCreate) -> None:
        for field, value in plan.model_dump().items():
            setattr(db_plan, field, value)
        db_plan.planned_amount = compute_amount(
            plan.quantity_1, plan.quantity_2, plan.quantity_3, plan.unit_price
        )

    async def create(self, plan: schemas.PlanCreate) -> schemas.Plan:
        """Create a plan; ``planned_amount`` is derived from the ekuivalen."""
        db_plan = Plan()
        self._apply(db_plan, plan)
        self.session.add(db_plan)
        await self.session.commit()
        return await self.get_by_id(db_plan.id)

    async def update(self, plan_id: int, plan: schemas.PlanCreate) -> Optional[schemas.Plan]:
        db_plan = await self._get_model(plan_id)
        if not db_plan:
            return None

        self._apply(db_plan, plan)
        await self.session.commit()
        return await self.get_by_id(plan_id)

    async def delete(self, plan_id: int) -> bool:
        db_plan = await self._get_model(plan_id)
        if not db_plan:
            return False

        await self.session.delete(db_plan)
        await self.session.commit()
        return True

    async def compute_realization(self, budget_year_id: int) -> List[Realization]:
        """Realization of every plan in a budget year, computed from one snapshot."""
        plans = await self.get_all(budget_year_id=budget_year_id)
        transactions = await TransactionRepository(self.session).get_for_plans(
            [plan.id for plan in plans]
        )
        return aggregate_many(plans, transactions)

    async def persist_realization(self, results: Sequence[Realization]) -> bool:
        """
        Write realization figures back onto the plans as a listing cache.

        Best-effort: a database failure is logged and rolled back, never raised.
        """
        try:
            for result in results:
                db_plan = await self.session.get(Plan, result.plan_id)
                if db_plan is None:
                    continue
                db_plan.total_realized = result.total_realized
                db_plan.percent_realized = min(result.percent_realized, MAX_CACHED_PERCENT)
                db_plan.remaining = result.remaining
            await self.session.commit()
            return True
        except SQLAlchemyError as e:
            logger.warning("Could not cache realization figures: %s", e)
            await self.session.rollback()
            return False

    async def refresh_realization(self, budget_year_id: int) -> List[Realization]:
        """Compute realization, then cache it. The computed values are returned either way."""
        results = await self.compute_realization(budget_year_id)
        await self.persist_realization(results)
        return results
