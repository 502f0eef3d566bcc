"""Flat report tables built from the cash book, realization and summary results."""

from typing import List, Optional, Sequence

import pandas as pd
from pydantic import BaseModel

from components.app_setting.schemas import ReportSettings
from components.finance.ekuivalen import format_breakdown
from components.finance.formatting import format_date, month_name
from components.finance.ledger import CashBook
from components.finance.period import DateRange, parse_month
from components.finance.realization import realization_totals
from components.finance.schemas import PeriodSummary, Realization
from components.finance.summary import summarize
from components.plan.schemas import Plan

CASH_BOOK_COLUMNS = [
    "No", "Tanggal", "Deskripsi", "Rencana Kegiatan", "Ekuivalen", "Pemasukan", "Pengeluaran", "Saldo",
]
REALIZATION_COLUMNS = [
    "Nama Kegiatan", "Kategori", "Direncana", "Terealisasi", "Persentase", "Sisa Anggaran",
]
BALANCE_SHEET_COLUMNS = ["Keterangan", "Rincian", "Jumlah"]
PLAN_COLUMNS = [
    "No", "Nama Kegiatan", "Kategori", "Tanggal Mulai", "Tanggal Selesai", "Rincian Ekuivalen", "Total",
]

MONEY_COLUMNS = {
    "Pemasukan", "Pengeluaran", "Saldo", "Direncana", "Terealisasi", "Sisa Anggaran", "Rincian", "Jumlah", "Total",
}
PERCENT_COLUMNS = {"Persentase"}


class ReportHeader(BaseModel):
    """Metadata printed above and below a report table."""
    title: str
    budget_year: str = ""
    period_label: str = ""
    category: str = ""
    settings: ReportSettings = ReportSettings()

    def lines(self) -> List[str]:
        lines = [self.title, self.settings.app_name]
        if self.budget_year:
            lines.append(f"Tahun Anggaran: {self.budget_year}")
        if self.period_label:
            lines.append(f"Periode: {self.period_label}")
        if self.category:
            lines.append(f"Kategori: {self.category}")
        return lines


def period_label(month=None, period: Optional[DateRange] = None) -> str:
    """The explicit date range when given, else a month name or ``Semua Bulan``."""
    if period is not None:
        return f"{format_date(period.start_date)} - {format_date(period.end_date)}"
    month_number = parse_month(month)
    return month_name(month_number) if month_number else "Semua Bulan"


def cash_book_table(book: CashBook) -> pd.DataFrame:
    """Buku Kas Umum rows followed by the income, expense and closing balance rows."""
    rows = []
    for number, entry in enumerate(book, start=1):
        transaction = entry.transaction
        rows.append({
            "No": number,
            "Tanggal": format_date(transaction.transaction_date),
            "Deskripsi": transaction.description or "-",
            "Rencana Kegiatan": transaction.plan.name if transaction.plan else "-",
            "Ekuivalen": transaction.breakdown,
            "Pemasukan": entry.income,
            "Pengeluaran": entry.expense,
            "Saldo": entry.running_balance,
        })

    balance = book.final_balance
    for label, income, expense in (
        ("TOTAL PEMASUKAN", book.total_income, 0.0),
        ("TOTAL PENGELUARAN", 0.0, book.total_expense),
        ("SALDO AKHIR", 0.0, 0.0),
    ):
        rows.append({
            "No": "", "Tanggal": "", "Deskripsi": label, "Rencana Kegiatan": "", "Ekuivalen": "",
            "Pemasukan": income, "Pengeluaran": expense, "Saldo": balance,
        })
    return pd.DataFrame(rows, columns=CASH_BOOK_COLUMNS)


def realization_table(plans: Sequence[Plan], results: Sequence[Realization]) -> pd.DataFrame:
    """One row per plan plus a totals row without percentage."""
    plan_by_id = {plan.id: plan for plan in plans}
    rows = []
    for result in results:
        plan = plan_by_id.get(result.plan_id)
        rows.append({
            "Nama Kegiatan": plan.name if plan else "-",
            "Kategori": plan.category.name if plan and plan.category else "-",
            "Direncana": result.planned_amount,
            "Terealisasi": result.total_realized,
            "Persentase": result.percent_realized,
            "Sisa Anggaran": result.remaining,
        })

    totals = realization_totals(results)
    rows.append({
        "Nama Kegiatan": "TOTAL",
        "Kategori": "",
        "Direncana": totals.planned_amount,
        "Terealisasi": totals.total_realized,
        "Persentase": None,
        "Sisa Anggaran": totals.remaining,
    })
    return pd.DataFrame(rows, columns=REALIZATION_COLUMNS)


def balance_sheet_table(summary: PeriodSummary) -> pd.DataFrame:
    """Neraca Keuangan: cash as the only asset, realized income and expense per category."""
    rows = [
        ("ASET", None, None),
        ("Kas dan Setara Kas", None, summary.net_balance),
        ("TOTAL ASET", None, summary.net_balance),
        ("", None, None),
        ("PENDAPATAN", None, None),
    ]
    rows += [(row.category_name, row.realized_total, None) for row in summary.income_rows() if row.realized_total]
    rows += [
        ("TOTAL PENDAPATAN", summary.total_realized_income, None),
        ("", None, None),
        ("PENGELUARAN", None, None),
    ]
    rows += [(row.category_name, row.realized_total, None) for row in summary.expense_rows() if row.realized_total]
    rows += [
        ("TOTAL PENGELUARAN", summary.total_realized_expense, None),
        ("", None, None),
        ("SALDO BERSIH", None, summary.net_balance),
    ]
    return pd.DataFrame(rows, columns=BALANCE_SHEET_COLUMNS)


def plan_summary(plans: Sequence[Plan]) -> PeriodSummary:
    """Planned income and expense of the listed plans, by their embedded categories."""
    categories = {plan.category.id: plan.category for plan in plans if plan.category}
    return summarize(plans, [], list(categories.values()))


def plan_table(plans: Sequence[Plan]) -> pd.DataFrame:
    """Laporan Rencana Kegiatan: one row per plan, then planned totals and their difference."""
    rows = []
    for number, plan in enumerate(plans, start=1):
        rows.append({
            "No": number,
            "Nama Kegiatan": plan.name,
            "Kategori": plan.category.name if plan.category else "-",
            "Tanggal Mulai": format_date(plan.start_date),
            "Tanggal Selesai": format_date(plan.end_date),
            "Rincian Ekuivalen": format_breakdown(plan) or "-",
            "Total": plan.planned_amount,
        })

    summary = plan_summary(plans)
    for label, amount in (
        ("TOTAL RENCANA", sum(plan.planned_amount for plan in plans)),
        ("TOTAL PEMASUKAN", summary.total_planned_income),
        ("TOTAL PENGELUARAN", summary.total_planned_expense),
        ("SALDO", summary.total_planned_income - summary.total_planned_expense),
    ):
        rows.append({
            "No": "", "Nama Kegiatan": label, "Kategori": "", "Tanggal Mulai": "",
            "Tanggal Selesai": "", "Rincian Ekuivalen": "", "Total": amount,
        })
    return pd.DataFrame(rows, columns=PLAN_COLUMNS)
