"""Loads consistent snapshots for the dashboard and the reports."""

import logging
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from components.app_setting.repository import AppSettingRepository
from components.app_setting.schemas import ReportSettings
from components.category.repository import CategoryRepository
from components.finance.activity import recent_activities
from components.finance.ledger import CashBook, compute_ledger
from components.finance.period import DateRange
from components.finance.schemas import Activity, PeriodSummary, Realization
from components.finance.summary import summarize
from components.plan.repository import PlanRepository
from components.plan.schemas import Plan
from components.transaction.repository import TransactionRepository
from components.transaction.schemas import Transaction

logger = logging.getLogger(__name__)


class ReportRepository:
    """Fetches plans, transactions and categories in one session and runs the calculations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def settings(self) -> ReportSettings:
        values = await AppSettingRepository(self.session).get_all()
        return ReportSettings.from_mapping(values)

    async def cash_book(self, period: DateRange) -> CashBook:
        transactions = await TransactionRepository(self.session).get_all(
            start_date=period.start_date, end_date=period.end_date
        )
        return compute_ledger(transactions)

    async def realization(self, budget_year_id: int) -> Tuple[List[Plan], List[Realization]]:
        """Plans of a budget year with their freshly computed, then cached, realization."""
        repo = PlanRepository(self.session)
        results = await repo.refresh_realization(budget_year_id)
        plans = await repo.get_all(budget_year_id=budget_year_id)
        return plans, results

    async def plans(
        self,
        budget_year_id: int,
        category_id: Optional[int] = None,
        period: Optional[DateRange] = None,
    ) -> List[Plan]:
        """Plans of a budget year, optionally only those starting within ``period``."""
        plans = await PlanRepository(self.session).get_all(budget_year_id, category_id)
        if period is None:
            return plans
        return [plan for plan in plans if period.contains(plan.start_date)]

    async def recent_activities(self, limit: int = 5) -> List[Activity]:
        transactions = await TransactionRepository(self.session).get_recent(limit)
        plans = await PlanRepository(self.session).get_recent(limit)
        return recent_activities(transactions, plans, limit)

    async def summary(self, budget_year_id: int, period: DateRange) -> PeriodSummary:
        plans = await PlanRepository(self.session).get_all(budget_year_id=budget_year_id)
        transactions = await TransactionRepository(self.session).get_all(
            start_date=period.start_date, end_date=period.end_date
        )
        categories = await CategoryRepository(self.session).get_all()
        self._log_dangling(transactions)
        return summarize(plans, transactions, categories, period)

    @staticmethod
    def _log_dangling(transactions: Sequence[Transaction]) -> None:
        for transaction in transactions:
            if transaction.plan_id is not None and transaction.plan is None:
                logger.warning(
                    "Transaction %s references missing plan %s, counted as uncategorized",
                    transaction.id,
                    transaction.plan_id,
                )
