"""Pydantic schemas for report responses."""

from datetime import date
from enum import Enum
from typing import List

from pydantic import BaseModel

from components.finance.ledger import CashBook
from components.finance.schemas import LedgerEntry, Realization, RealizationTotals
from components.plan.schemas import Plan
from components.report.tables import plan_summary


class ReportFormat(str, Enum):
    JSON = "json"
    XLSX = "xlsx"
    PDF = "pdf"


class CashBookReport(BaseModel):
    """Schema for the general cash book."""
    start_date: date
    end_date: date
    entries: List[LedgerEntry]
    total_income: float
    total_expense: float
    final_balance: float

    @classmethod
    def from_book(cls, book: CashBook, start_date: date, end_date: date) -> "CashBookReport":
        return cls(
            start_date=start_date,
            end_date=end_date,
            entries=book.entries,
            total_income=book.total_income,
            total_expense=book.total_expense,
            final_balance=book.final_balance,
        )


class PlanRealization(BaseModel):
    plan: Plan
    realization: Realization


class RealizationReport(BaseModel):
    """Schema for the realization report."""
    budget_year_id: int
    rows: List[PlanRealization]
    totals: RealizationTotals


class PlanReport(BaseModel):
    """Schema for the plan list (Laporan Rencana Kegiatan)."""
    budget_year_id: int
    plans: List[Plan]
    total_planned: float
    total_planned_income: float
    total_planned_expense: float
    planned_balance: float

    @classmethod
    def from_plans(cls, budget_year_id: int, plans: List[Plan]) -> "PlanReport":
        summary = plan_summary(plans)
        return cls(
            budget_year_id=budget_year_id,
            plans=plans,
            total_planned=sum(plan.planned_amount for plan in plans),
            total_planned_income=summary.total_planned_income,
            total_planned_expense=summary.total_planned_expense,
            planned_balance=summary.total_planned_income - summary.total_planned_expense,
        )
