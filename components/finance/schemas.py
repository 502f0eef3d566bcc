"""Result schemas of the budget calculations."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from components.core.schemas import CoreError, FlowType
from components.transaction.schemas import Transaction

UNCATEGORIZED = "Lainnya"


class Realization(BaseModel):
    """How much of a plan has been realized."""
    plan_id: Optional[int] = None
    planned_amount: float = 0
    total_realized: float = 0
    percent_realized: float = 0
    remaining: float = 0
    error: Optional[CoreError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


class RealizationTotals(BaseModel):
    """Totals row of the realization report."""
    planned_amount: float = 0
    total_realized: float = 0
    remaining: float = 0


class LedgerEntry(BaseModel):
    """One line of the cash book (Buku Kas Umum)."""
    transaction: Transaction
    income: float = 0
    expense: float = 0
    running_balance: float = 0


class CategoryTotal(BaseModel):
    """Planned and realized totals of one category in one direction."""
    category_id: Optional[int] = None
    category_name: str = UNCATEGORIZED
    kind: FlowType
    planned_total: float = 0
    realized_total: float = 0


class PeriodSummary(BaseModel):
    total_planned_income: float = 0
    total_planned_expense: float = 0
    total_realized_income: float = 0
    total_realized_expense: float = 0
    net_balance: float = 0
    by_category: List[CategoryTotal] = []
    error: Optional[CoreError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def income_rows(self) -> List[CategoryTotal]:
        return [row for row in self.by_category if row.kind == FlowType.INCOME]

    def expense_rows(self) -> List[CategoryTotal]:
        return [row for row in self.by_category if row.kind == FlowType.EXPENSE]


class ActivityKind(str, Enum):
    TRANSACTION = "transaksi"
    PLAN = "rencana"


class Activity(BaseModel):
    """One line of the dashboard's recent activity feed."""
    kind: ActivityKind
    id: int
    title: str
    timestamp: Optional[datetime] = None
    amount: Optional[float] = None
    type: Optional[FlowType] = None
