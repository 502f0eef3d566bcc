"""Report endpoints: cash book, realization and balance sheet."""

import io
from datetime import date
from typing import Optional

import pandas as pd
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from components.category.repository import CategoryRepository
from components.core.init_db import get_db
from components.finance.period import parse_month
from components.finance.realization import realization_totals
from components.report import tables
from components.report.export import PDF_MEDIA_TYPE, XLSX_MEDIA_TYPE, to_excel, to_pdf
from components.report.repository import ReportRepository
from components.report.schemas import (
    CashBookReport,
    PlanRealization,
    PlanReport,
    RealizationReport,
    ReportFormat,
)
from components.user.models import User
from restapi.endpoints.auth import get_current_user
from restapi.endpoints.helpers import resolve_period

router = APIRouter(
    prefix="/reports",
    tags=["reports"],
    responses={404: {"description": "Not found"}},
)


def _file_response(
    df: pd.DataFrame,
    header: tables.ReportHeader,
    report_format: ReportFormat,
    filename: str,
    signed_on: date,
) -> StreamingResponse:
    if report_format == ReportFormat.XLSX:
        content, media_type = to_excel(df, header), XLSX_MEDIA_TYPE
    else:
        content, media_type = to_pdf(df, header, signed_on), PDF_MEDIA_TYPE
    return StreamingResponse(
        io.BytesIO(content),
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}.{report_format.value}"},
    )


@router.get("/cash-book")
async def get_cash_book(
    budget_year_id: Optional[int] = Query(None, description="Budget year, defaults to the active one"),
    month: Optional[str] = Query(None, description="Month 1-12 or 'all'"),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    format: ReportFormat = Query(ReportFormat.JSON),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """General cash book (Buku Kas Umum) with running balance."""
    budget_year, period = await resolve_period(db, budget_year_id, month, start_date, end_date)
    repo = ReportRepository(db)
    book = await repo.cash_book(period)

    if format == ReportFormat.JSON:
        return CashBookReport.from_book(book, period.start_date, period.end_date)

    explicit = period if start_date and end_date else None
    header = tables.ReportHeader(
        title="BUKU KAS UMUM",
        budget_year=budget_year.name,
        period_label=tables.period_label(month, explicit),
        settings=await repo.settings(),
    )
    return _file_response(tables.cash_book_table(book), header, format, "buku-kas-umum", date.today())


@router.get("/realization")
async def get_realization(
    budget_year_id: Optional[int] = Query(None, description="Budget year, defaults to the active one"),
    format: ReportFormat = Query(ReportFormat.JSON),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Realization of every plan of a budget year (Realisasi Kegiatan)."""
    budget_year, _ = await resolve_period(db, budget_year_id, None, None, None)
    repo = ReportRepository(db)
    plans, results = await repo.realization(budget_year.id)

    if format == ReportFormat.JSON:
        return RealizationReport(
            budget_year_id=budget_year.id,
            rows=[PlanRealization(plan=plan, realization=result) for plan, result in zip(plans, results)],
            totals=realization_totals(results),
        )

    header = tables.ReportHeader(
        title="LAPORAN REALISASI KEGIATAN",
        budget_year=budget_year.name,
        settings=await repo.settings(),
    )
    return _file_response(
        tables.realization_table(plans, results), header, format, "realisasi-kegiatan", budget_year.end_date
    )


@router.get("/plans")
async def get_plan_report(
    budget_year_id: Optional[int] = Query(None, description="Budget year, defaults to the active one"),
    category_id: Optional[int] = Query(None, description="Only plans of this category"),
    month: Optional[str] = Query(None, description="Month 1-12 or 'all', filters on the plan start date"),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    format: ReportFormat = Query(ReportFormat.JSON),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Plan list (Laporan Rencana Kegiatan).

    Without a month or an explicit date range every plan of the budget year
    is listed. Totals give planned income, planned expense and their difference.
    """
    budget_year, period = await resolve_period(db, budget_year_id, month, start_date, end_date)
    category_name = ""
    if category_id is not None:
        category = await CategoryRepository(db).get_by_id(category_id)
        if category is None:
            raise HTTPException(status_code=404, detail="Category not found")
        category_name = category.name

    explicit = period if start_date and end_date else None
    narrowed = explicit is not None or parse_month(month) is not None
    repo = ReportRepository(db)
    plans = await repo.plans(budget_year.id, category_id, period if narrowed else None)

    if format == ReportFormat.JSON:
        return PlanReport.from_plans(budget_year.id, plans)

    header = tables.ReportHeader(
        title="LAPORAN RENCANA KEGIATAN",
        budget_year=budget_year.name,
        period_label=tables.period_label(month, explicit),
        category=category_name,
        settings=await repo.settings(),
    )
    return _file_response(tables.plan_table(plans), header, format, "rencana-kegiatan", date.today())


@router.get("/balance-sheet")
async def get_balance_sheet(
    budget_year_id: Optional[int] = Query(None, description="Budget year, defaults to the active one"),
    month: Optional[str] = Query(None, description="Month 1-12 or 'all'"),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    format: ReportFormat = Query(ReportFormat.JSON),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Balance sheet (Neraca Keuangan) of a period."""
    budget_year, period = await resolve_period(db, budget_year_id, month, start_date, end_date)
    repo = ReportRepository(db)
    summary = await repo.summary(budget_year.id, period)

    if format == ReportFormat.JSON:
        return summary

    explicit = period if start_date and end_date else None
    header = tables.ReportHeader(
        title="NERACA KEUANGAN",
        budget_year=budget_year.name,
        period_label=tables.period_label(month, explicit),
        settings=await repo.settings(),
    )
    return _file_response(tables.balance_sheet_table(summary), header, format, "neraca-keuangan", date.today())
