import asyncio
from datetime import date

import pytest
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import components.core.init_db  # noqa: F401  registers every model
from components.budget_year.models import BudgetYear
from components.budget_year.repository import BudgetYearRepository
from components.budget_year.schemas import BudgetYearCreate
from components.category.repository import CategoryRepository
from components.category.schemas import CategoryCreate
from components.core.database import DatabaseManager
from components.core.schemas import FlowType
from components.plan.repository import PlanRepository
from components.plan.schemas import PlanCreate
from components.report.repository import ReportRepository
from components.report.schemas import ReportFormat
from components.transaction.repository import TransactionRepository
from components.transaction.schemas import TransactionCreate
from restapi.endpoints.budget_year import create_budget_year, update_budget_year
from restapi.endpoints.category import update_category
from restapi.endpoints.plan import create_plan
from restapi.endpoints.report import get_plan_report


def _run(scenario):
    """Run ``scenario(session)`` against a fresh in-memory database."""
    async def main():
        engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
        manager = DatabaseManager(engine)
        await manager.create_all()
        try:
            async with manager.get_db() as session:
                return await scenario(session)
        finally:
            await engine.dispose()

    return asyncio.run(main())


def _year(name, start_year, is_active=False) -> BudgetYearCreate:
    return BudgetYearCreate(
        name=name,
        start_date=date(start_year, 1, 1),
        end_date=date(start_year, 12, 31),
        is_active=is_active,
    )


def _plan(budget_year_id, category_id, name="Rapat Koordinasi", start=date(2024, 1, 10)) -> PlanCreate:
    return PlanCreate(
        budget_year_id=budget_year_id,
        category_id=category_id,
        name=name,
        start_date=start,
        end_date=start,
        quantity_1=1,
        unit_price=1000,
    )


async def _active_names(session):
    result = await session.execute(select(BudgetYear.name).where(BudgetYear.is_active.is_(True)))
    return list(result.scalars().all())


def test_activating_a_year_deactivates_the_others() -> None:
    async def scenario(session):
        repo = BudgetYearRepository(session)
        first = await repo.create(_year("TA 2023", 2023, is_active=True))
        second = await repo.create(_year("TA 2024", 2024))
        after_create = await _active_names(session)

        await repo.activate(second.id)
        after_activate = await _active_names(session)

        await repo.update(first.id, _year("TA 2023", 2023, is_active=True))
        after_update = await _active_names(session)

        await repo.create(_year("TA 2025", 2025, is_active=True))
        return after_create, after_activate, after_update, await _active_names(session)

    after_create, after_activate, after_update, after_new = _run(scenario)
    assert after_create == ["TA 2023"]
    assert after_activate == ["TA 2024"]
    assert after_update == ["TA 2023"]
    assert after_new == ["TA 2025"]


def test_duplicate_budget_year_name_is_rejected() -> None:
    async def scenario(session):
        first = await create_budget_year(budget_year=_year("TA 2024", 2024), db=session, current_user=None)
        second = await create_budget_year(budget_year=_year("TA 2025", 2025), db=session, current_user=None)

        with pytest.raises(HTTPException) as created:
            await create_budget_year(budget_year=_year("TA 2024", 2024), db=session, current_user=None)
        with pytest.raises(HTTPException) as renamed:
            await update_budget_year(
                budget_year_id=second.id, budget_year=_year("TA 2024", 2025), db=session, current_user=None
            )
        unchanged = await update_budget_year(
            budget_year_id=first.id, budget_year=_year("TA 2024", 2024, is_active=True), db=session, current_user=None
        )
        return created.value.status_code, renamed.value.status_code, unchanged.is_active

    assert _run(scenario) == (400, 400, True)


def test_plan_with_unknown_references_is_rejected() -> None:
    async def scenario(session):
        budget_year = await BudgetYearRepository(session).create(_year("TA 2024", 2024))
        category = await CategoryRepository(session).create(CategoryCreate(name="Rapat", kind=FlowType.EXPENSE))

        codes = []
        for plan in (_plan(budget_year.id, 999), _plan(999, category.id)):
            with pytest.raises(HTTPException) as rejected:
                await create_plan(plan=plan, db=session, current_user=None)
            codes.append(rejected.value.status_code)

        created = await create_plan(plan=_plan(budget_year.id, category.id), db=session, current_user=None)
        return codes, created.planned_amount

    codes, planned = _run(scenario)
    assert codes == [400, 400]
    assert planned == 1000


def test_category_kind_is_fixed_once_used() -> None:
    async def scenario(session):
        budget_year = await BudgetYearRepository(session).create(_year("TA 2024", 2024))
        categories = CategoryRepository(session)
        category = await categories.create(CategoryCreate(name="Konsumsi", kind=FlowType.EXPENSE))
        unused = await categories.create(CategoryCreate(name="Hibah", kind=FlowType.EXPENSE))
        plan = await PlanRepository(session).create(_plan(budget_year.id, category.id))
        await TransactionRepository(session).create(TransactionCreate(
            plan_id=plan.id,
            transaction_date=date(2024, 1, 10),
            description="Snack rapat",
            type=FlowType.EXPENSE,
            quantity_1=1,
            unit_price=500,
        ))

        with pytest.raises(HTTPException) as rejected:
            await update_category(
                category_id=category.id,
                category=CategoryCreate(name="Konsumsi", kind=FlowType.INCOME),
                db=session,
                current_user=None,
            )
        renamed = await update_category(
            category_id=category.id,
            category=CategoryCreate(name="Konsumsi Rapat", kind=FlowType.EXPENSE),
            db=session,
            current_user=None,
        )
        switched = await update_category(
            category_id=unused.id,
            category=CategoryCreate(name="Hibah", kind=FlowType.INCOME),
            db=session,
            current_user=None,
        )
        results = await PlanRepository(session).compute_realization(budget_year.id)
        return rejected.value.status_code, renamed.name, switched.kind, results[0].total_realized

    status_code, name, kind, realized = _run(scenario)
    assert status_code == 400
    assert name == "Konsumsi Rapat"
    assert kind == FlowType.INCOME
    assert realized == 500


def test_plan_report_filters_by_start_month() -> None:
    async def scenario(session):
        budget_year = await BudgetYearRepository(session).create(_year("TA 2024/2025", 2024))
        category = await CategoryRepository(session).create(CategoryCreate(name="Rapat", kind=FlowType.EXPENSE))
        plans = PlanRepository(session)
        await plans.create(_plan(budget_year.id, category.id, "Rapat Januari", date(2024, 1, 10)))
        await plans.create(_plan(budget_year.id, category.id, "Rapat Maret", date(2024, 3, 5)))

        march = await get_plan_report(
            budget_year_id=budget_year.id,
            category_id=None,
            month="3",
            start_date=None,
            end_date=None,
            format=ReportFormat.JSON,
            db=session,
            current_user=None,
        )
        everything = await get_plan_report(
            budget_year_id=budget_year.id,
            category_id=category.id,
            month="all",
            start_date=None,
            end_date=None,
            format=ReportFormat.JSON,
            db=session,
            current_user=None,
        )
        return march, everything

    march, everything = _run(scenario)
    assert [plan.name for plan in march.plans] == ["Rapat Maret"]
    assert march.total_planned_expense == 1000
    assert [plan.name for plan in everything.plans] == ["Rapat Januari", "Rapat Maret"]
    assert everything.planned_balance == -2000


def test_recent_activities_are_limited() -> None:
    async def scenario(session):
        transactions = TransactionRepository(session)
        for day in (1, 2, 3):
            await transactions.create(TransactionCreate(
                transaction_date=date(2024, 1, day),
                description=f"Kas masuk {day}",
                type=FlowType.INCOME,
                quantity_1=1,
                unit_price=100,
            ))
        recent = await transactions.get_recent(2)
        activities = await ReportRepository(session).recent_activities(2)
        return recent, activities

    recent, activities = _run(scenario)
    assert [t.description for t in recent] == ["Kas masuk 3", "Kas masuk 2"]
    assert all(t.created_at is not None for t in recent)
    assert len(activities) == 2
