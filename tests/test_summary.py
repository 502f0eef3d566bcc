from datetime import date

from components.category.schemas import Category
from components.core.schemas import CoreError, FlowType
from components.finance.period import resolve_date_range
from components.finance.schemas import UNCATEGORIZED
from components.finance.summary import summarize
from components.plan.schemas import Plan
from components.transaction.schemas import PlanRef, Transaction

CATEGORIES = [
    Category(id=1, name="Iuran Anggota", kind=FlowType.INCOME),
    Category(id=2, name="Alat Tulis Kantor", kind=FlowType.EXPENSE),
]


def _plan(plan_id, category_id, amount) -> Plan:
    return Plan(
        id=plan_id,
        budget_year_id=1,
        category_id=category_id,
        name=f"Kegiatan {plan_id}",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        quantity_1=1,
        unit_price=amount,
    )


def _transaction(transaction_id, type, amount, plan_id=None, month=1, plan=None) -> Transaction:
    return Transaction(
        id=transaction_id,
        plan_id=plan_id,
        plan=plan,
        transaction_date=date(2024, month, 15),
        description=f"Transaksi {transaction_id}",
        type=type,
        quantity_1=1,
        unit_price=amount,
    )


def _sample_plans():
    return [_plan(1, 1, 1_000_000), _plan(2, 2, 500_000)]


def _sample_transactions():
    return [
        _transaction(1, FlowType.INCOME, 300_000, plan_id=1),
        _transaction(2, FlowType.EXPENSE, 200_000, plan_id=2),
        _transaction(3, FlowType.INCOME, 50_000),
        _transaction(4, FlowType.EXPENSE, 25_000, plan_id=99),
    ]


def test_empty_input() -> None:
    summary = summarize([], [], [])

    assert summary.total_planned_income == 0
    assert summary.total_planned_expense == 0
    assert summary.total_realized_income == 0
    assert summary.total_realized_expense == 0
    assert summary.net_balance == 0
    assert summary.by_category == []
    assert summary.is_valid


def test_totals() -> None:
    summary = summarize(_sample_plans(), _sample_transactions(), CATEGORIES)

    assert summary.total_planned_income == 1_000_000
    assert summary.total_planned_expense == 500_000
    assert summary.total_realized_income == 350_000
    assert summary.total_realized_expense == 225_000
    assert summary.net_balance == 125_000


def test_category_rows_add_up_to_totals() -> None:
    summary = summarize(_sample_plans(), _sample_transactions(), CATEGORIES)

    assert sum(r.realized_total for r in summary.income_rows()) == summary.total_realized_income
    assert sum(r.realized_total for r in summary.expense_rows()) == summary.total_realized_expense
    assert sum(r.planned_total for r in summary.income_rows()) == summary.total_planned_income
    assert sum(r.planned_total for r in summary.expense_rows()) == summary.total_planned_expense


def test_untraceable_transactions_go_to_uncategorized() -> None:
    summary = summarize(_sample_plans(), _sample_transactions(), CATEGORIES)
    rows = [(r.category_name, r.kind, r.planned_total, r.realized_total) for r in summary.by_category]

    assert rows == [
        ("Iuran Anggota", FlowType.INCOME, 1_000_000, 300_000),
        ("Alat Tulis Kantor", FlowType.EXPENSE, 500_000, 200_000),
        (UNCATEGORIZED, FlowType.INCOME, 0, 50_000),
        (UNCATEGORIZED, FlowType.EXPENSE, 0, 25_000),
    ]
    assert summary.by_category[-1].category_id is None


def test_embedded_plan_resolves_category() -> None:
    transaction = _transaction(
        1, FlowType.EXPENSE, 75_000, plan_id=7,
        plan=PlanRef(id=7, name="Kegiatan lama", category_id=2),
    )
    summary = summarize([], [transaction], CATEGORIES)

    assert [(r.category_name, r.realized_total) for r in summary.by_category] == [("Alat Tulis Kantor", 75_000)]
    assert summary.total_planned_expense == 0


def test_realized_follows_transaction_type() -> None:
    # Income booked against an expense plan counts as income in the same category
    transactions = [_transaction(1, FlowType.INCOME, 10_000, plan_id=2)]
    summary = summarize(_sample_plans(), transactions, CATEGORIES)

    assert summary.total_realized_income == 10_000
    rows = [(r.category_name, r.kind, r.realized_total) for r in summary.by_category]
    assert ("Alat Tulis Kantor", FlowType.INCOME, 10_000) in rows
    assert ("Alat Tulis Kantor", FlowType.EXPENSE, 0) in rows


def test_plans_with_unknown_category_are_skipped() -> None:
    summary = summarize([_plan(1, 42, 700_000)], [], CATEGORIES)

    assert summary.total_planned_income == 0
    assert summary.total_planned_expense == 0
    assert summary.by_category == []


def test_period_filters_transactions() -> None:
    transactions = _sample_transactions() + [_transaction(5, FlowType.INCOME, 80_000, plan_id=1, month=2)]
    summary = summarize(_sample_plans(), transactions, CATEGORIES, resolve_date_range(2024, 2))

    assert summary.total_realized_income == 80_000
    assert summary.total_realized_expense == 0
    assert summary.total_planned_income == 1_000_000


def test_invalid_period() -> None:
    period = resolve_date_range(2024, None, date(2024, 6, 1), date(2024, 5, 1))
    summary = summarize(_sample_plans(), _sample_transactions(), CATEGORIES, period)

    assert summary.error == CoreError.INVALID_DATE_RANGE
    assert summary.by_category == []
    assert summary.net_balance == 0
