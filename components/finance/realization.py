"""Realization of plans against actual transactions."""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from components.category.schemas import Category
from components.core.schemas import CoreError
from components.finance.schemas import Realization, RealizationTotals
from components.plan.schemas import Plan
from components.transaction.schemas import Transaction


def percentage(part: float, whole: float) -> float:
    """``part`` as a percentage of ``whole`` rounded to 2 places, 0 when ``whole`` is 0."""
    if not whole:
        return 0.0
    return round(part / whole * 100, 2)


def aggregate(
    plan: Plan,
    transactions: Iterable[Transaction],
    category: Optional[Category] = None,
) -> Realization:
    """Compute how much of ``plan`` has been realized.

    Only transactions linked to the plan whose type matches the plan's
    category kind are counted; opposite-direction transactions on the same
    plan are ignored. ``category`` overrides the plan's embedded category.
    """
    planned = plan.planned_amount
    category = category or plan.category
    if category is None:
        return Realization(
            plan_id=plan.id,
            planned_amount=planned,
            remaining=planned,
            error=CoreError.MISSING_CATEGORY,
        )

    total = sum(
        transaction.actual_amount
        for transaction in transactions
        if transaction.plan_id == plan.id and transaction.type == category.kind
    )
    result = Realization(
        plan_id=plan.id,
        planned_amount=planned,
        total_realized=total,
        remaining=planned - total,
    )
    if planned < 0:
        result.error = CoreError.NEGATIVE_PLANNED_AMOUNT
    else:
        result.percent_realized = percentage(total, planned)
    return result


def aggregate_many(
    plans: Sequence[Plan],
    transactions: Iterable[Transaction],
    categories: Iterable[Category] = (),
) -> List[Realization]:
    """Realization of every plan, in plan order."""
    by_plan: Dict[int, List[Transaction]] = defaultdict(list)
    for transaction in transactions:
        if transaction.plan_id is not None:
            by_plan[transaction.plan_id].append(transaction)

    category_by_id = {category.id: category for category in categories}
    return [
        aggregate(plan, by_plan.get(plan.id, []), category_by_id.get(plan.category_id))
        for plan in plans
    ]


def realization_totals(results: Iterable[Realization]) -> RealizationTotals:
    """Sum planned, realized and remaining over all plans.

    No percentage: it is meaningless across income and expense plans.
    """
    totals = RealizationTotals()
    for result in results:
        totals.planned_amount += result.planned_amount
        totals.total_realized += result.total_realized
        totals.remaining += result.remaining
    return totals
