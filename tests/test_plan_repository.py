import asyncio
from types import SimpleNamespace

from sqlalchemy.exc import OperationalError

from components.finance.schemas import Realization
from components.plan.repository import MAX_CACHED_PERCENT, PlanRepository


class FakeSession:
    """Stands in for AsyncSession in the realization cache write."""

    def __init__(self, fail_commit: bool = False):
        self.fail_commit = fail_commit
        self.committed = False
        self.rolled_back = False
        self.plans = {
            1: SimpleNamespace(total_realized=None, percent_realized=None, remaining=None),
        }

    async def get(self, model, key):
        return self.plans.get(key)

    async def commit(self):
        if self.fail_commit:
            raise OperationalError("UPDATE plans", {}, Exception("database is locked"))
        self.committed = True

    async def rollback(self):
        self.rolled_back = True


class StubPlanRepository(PlanRepository):
    async def compute_realization(self, budget_year_id):
        return _sample_results()


def _sample_results():
    return [
        Realization(plan_id=1, planned_amount=1000, total_realized=250, percent_realized=25.0, remaining=750),
        Realization(plan_id=2, planned_amount=500, total_realized=0, percent_realized=0, remaining=500),
    ]


def test_persist_realization_updates_cache() -> None:
    session = FakeSession()
    stored = asyncio.run(PlanRepository(session).persist_realization(_sample_results()))

    assert stored is True
    assert session.committed
    plan = session.plans[1]
    assert (plan.total_realized, plan.percent_realized, plan.remaining) == (250, 25.0, 750)


def test_huge_overrun_is_clamped_in_cache() -> None:
    session = FakeSession()
    overrun = Realization(plan_id=1, planned_amount=0.01, total_realized=5e12, percent_realized=5e16, remaining=-5e12)
    stored = asyncio.run(PlanRepository(session).persist_realization([overrun]))

    assert stored is True
    assert session.plans[1].percent_realized == MAX_CACHED_PERCENT
    assert overrun.percent_realized == 5e16


def test_persist_realization_failure_is_not_raised() -> None:
    session = FakeSession(fail_commit=True)
    stored = asyncio.run(PlanRepository(session).persist_realization(_sample_results()))

    assert stored is False
    assert session.rolled_back


def test_refresh_realization_returns_results_when_cache_fails() -> None:
    session = FakeSession(fail_commit=True)
    results = asyncio.run(StubPlanRepository(session).refresh_realization(budget_year_id=1))

    assert [r.total_realized for r in results] == [250, 0]
    assert session.rolled_back
