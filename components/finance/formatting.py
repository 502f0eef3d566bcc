"""Indonesian number, currency and date formatting used by reports."""

from datetime import date

MONTH_NAMES = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]

_SEPARATORS = str.maketrans({",": ".", ".": ","})


def format_number(amount: float, max_decimals: int = 3) -> str:
    """Format a number with ``.`` as thousands and ``,`` as decimal separator.

    >>> format_number(1234567.5)
    '1.234.567,5'
    """
    text = f"{amount:,.{max_decimals}f}"
    if max_decimals > 0:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text.translate(_SEPARATORS)


def format_currency(amount: float) -> str:
    """Format an amount as Rupiah without decimals, e.g. ``Rp100.000``."""
    rounded = round(abs(amount))
    sign = "-" if amount < 0 and rounded else ""
    return f"{sign}Rp{format_number(rounded, max_decimals=0)}"


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def format_date(value: date) -> str:
    """``date(2024, 1, 5)`` -> ``5 Januari 2024``."""
    return f"{value.day} {month_name(value.month)} {value.year}"
