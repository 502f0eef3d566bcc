"""Reporting period resolution."""

import calendar
import re
from datetime import date
from typing import Optional, Union

from pydantic import BaseModel

from components.core.schemas import CoreError

ALL_MONTHS = "all"

Month = Union[int, str, None]


class DateRange(BaseModel):
    """Inclusive date range; ``error`` is set when the range is unusable."""
    start_date: date
    end_date: date
    error: Optional[CoreError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def contains(self, value: date) -> bool:
        return self.start_date <= value <= self.end_date


def validate_date_range(start_date: Optional[date], end_date: Optional[date]) -> bool:
    """False only when both bounds are given and start is after end."""
    if not start_date or not end_date:
        return True
    return start_date <= end_date


def _checked(start_date: date, end_date: date, error: Optional[CoreError] = None) -> DateRange:
    if not validate_date_range(start_date, end_date):
        error = CoreError.INVALID_DATE_RANGE
    return DateRange(start_date=start_date, end_date=end_date, error=error)


def parse_month(month: Month) -> Optional[int]:
    try:
        number = int(month)
    except (TypeError, ValueError):
        return None
    return number if 1 <= number <= 12 else None


def resolve_date_range(
    year: int,
    month: Month = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> DateRange:
    """Resolve the period a dashboard or report covers.

    An explicit ``start_date`` + ``end_date`` pair wins over ``year``/``month``
    and is returned verbatim. Otherwise the range is the given month of
    ``year``, or the whole year when ``month`` is ``None`` or ``"all"``.
    """
    if start_date and end_date:
        return _checked(start_date, end_date)

    whole_year = (date(year, 1, 1), date(year, 12, 31))
    if month is None or str(month).strip().lower() in ("", ALL_MONTHS):
        return _checked(*whole_year)

    month_number = parse_month(month)
    if month_number is None:
        return _checked(*whole_year, error=CoreError.INVALID_MONTH)

    last_day = calendar.monthrange(year, month_number)[1]
    return _checked(date(year, month_number, 1), date(year, month_number, last_day))


def budget_year_number(name: str) -> Optional[int]:
    """First calendar year in a budget year name: ``"TA 2024/2025"`` -> 2024."""
    match = re.search(r"\d{4}", name or "")
    return int(match.group(0)) if match else None
