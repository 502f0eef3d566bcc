"""Period summary for the dashboard and the balance sheet (Neraca Keuangan)."""

from typing import Dict, Iterable, Optional, Sequence, Tuple

from components.category.schemas import Category
from components.core.schemas import FlowType
from components.finance.period import DateRange
from components.finance.schemas import CategoryTotal, PeriodSummary
from components.plan.schemas import Plan
from components.transaction.schemas import Transaction

_FLOW_ORDER = {FlowType.INCOME: 0, FlowType.EXPENSE: 1}


def _transaction_category_id(
    transaction: Transaction,
    plan_by_id: Dict[int, Plan],
) -> Optional[int]:
    if transaction.plan_id is None:
        return None
    plan = plan_by_id.get(transaction.plan_id)
    if plan is not None:
        return plan.category_id
    if transaction.plan is not None and transaction.plan.id == transaction.plan_id:
        return transaction.plan.category_id
    return None


def summarize(
    plans: Sequence[Plan],
    transactions: Iterable[Transaction],
    categories: Sequence[Category],
    period: Optional[DateRange] = None,
) -> PeriodSummary:
    """Planned and realized totals, overall and per category.

    Planned figures follow the kind of the plan's category, realized figures
    follow the transaction type. Transactions that cannot be traced to a
    known category are grouped under ``Lainnya`` instead of being dropped.
    When ``period`` is given, transactions outside it are ignored.
    """
    if period is not None and not period.is_valid:
        return PeriodSummary(error=period.error)

    category_by_id = {category.id: category for category in categories}
    position = {category.id: index for index, category in enumerate(categories)}
    plan_by_id = {plan.id: plan for plan in plans}
    buckets: Dict[Tuple[Optional[int], FlowType], CategoryTotal] = {}

    def bucket(category: Optional[Category], kind: FlowType) -> CategoryTotal:
        key = (category.id if category else None, kind)
        if key not in buckets:
            if category is None:
                buckets[key] = CategoryTotal(kind=kind)
            else:
                buckets[key] = CategoryTotal(category_id=category.id, category_name=category.name, kind=kind)
        return buckets[key]

    summary = PeriodSummary()

    for plan in plans:
        category = category_by_id.get(plan.category_id)
        if category is None:
            continue
        amount = plan.planned_amount
        bucket(category, category.kind).planned_total += amount
        if category.kind == FlowType.INCOME:
            summary.total_planned_income += amount
        else:
            summary.total_planned_expense += amount

    for transaction in transactions:
        if period is not None and not period.contains(transaction.transaction_date):
            continue
        category = category_by_id.get(_transaction_category_id(transaction, plan_by_id))
        amount = transaction.actual_amount
        bucket(category, transaction.type).realized_total += amount
        if transaction.type == FlowType.INCOME:
            summary.total_realized_income += amount
        else:
            summary.total_realized_expense += amount

    summary.net_balance = summary.total_realized_income - summary.total_realized_expense
    summary.by_category = sorted(
        buckets.values(),
        key=lambda row: (
            len(position) if row.category_id is None else position[row.category_id],
            _FLOW_ORDER[row.kind],
        ),
    )
    return summary
