"""Recent activity feed: newest transactions and plans merged by creation time."""

from datetime import datetime
from typing import Iterable, List

from components.finance.schemas import Activity, ActivityKind
from components.plan.schemas import Plan
from components.transaction.schemas import Transaction


def recent_activities(
    transactions: Iterable[Transaction],
    plans: Iterable[Plan],
    limit: int = 5,
) -> List[Activity]:
    """Newest first, at most ``limit`` entries.

    Entries without a creation time sort last; ties keep transactions
    before plans.
    """
    activities = [
        Activity(
            kind=ActivityKind.TRANSACTION,
            id=transaction.id,
            title=transaction.description,
            timestamp=transaction.created_at,
            amount=transaction.actual_amount,
            type=transaction.type,
        )
        for transaction in transactions
    ]
    activities += [
        Activity(kind=ActivityKind.PLAN, id=plan.id, title=plan.name, timestamp=plan.created_at)
        for plan in plans
    ]
    activities.sort(key=lambda activity: activity.timestamp or datetime.min, reverse=True)
    return activities[:limit]
