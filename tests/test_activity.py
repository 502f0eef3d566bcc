from datetime import date, datetime

from components.core.schemas import FlowType
from components.finance.activity import recent_activities
from components.finance.schemas import ActivityKind
from components.plan.schemas import Plan
from components.transaction.schemas import Transaction


def _transaction(transaction_id, created_at) -> Transaction:
    return Transaction(
        id=transaction_id,
        transaction_date=date(2024, 1, 1),
        description=f"Transaksi {transaction_id}",
        type=FlowType.EXPENSE,
        quantity_1=2,
        unit_price=1000,
        created_at=created_at,
    )


def _plan(plan_id, created_at) -> Plan:
    return Plan(
        id=plan_id,
        budget_year_id=1,
        category_id=1,
        name=f"Kegiatan {plan_id}",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        created_at=created_at,
    )


def test_newest_first_across_kinds() -> None:
    transactions = [_transaction(1, datetime(2024, 1, 3, 9)), _transaction(2, datetime(2024, 1, 1, 9))]
    plans = [_plan(1, datetime(2024, 1, 2, 9))]
    activities = recent_activities(transactions, plans)

    assert [(a.kind, a.id) for a in activities] == [
        (ActivityKind.TRANSACTION, 1),
        (ActivityKind.PLAN, 1),
        (ActivityKind.TRANSACTION, 2),
    ]
    assert activities[0].amount == 2000
    assert activities[0].type == FlowType.EXPENSE
    assert activities[1].amount is None
    assert activities[1].title == "Kegiatan 1"


def test_limit_and_missing_timestamps() -> None:
    transactions = [_transaction(i, datetime(2024, 2, i)) for i in range(1, 7)]
    plans = [_plan(1, None)]
    activities = recent_activities(transactions, plans, limit=5)

    assert [a.id for a in activities] == [6, 5, 4, 3, 2]
    assert recent_activities([], plans)[0].kind == ActivityKind.PLAN
