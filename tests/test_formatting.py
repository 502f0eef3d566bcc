from datetime import date

from components.finance.formatting import format_currency, format_date, format_number, month_name


def test_format_number() -> None:
    assert format_number(1234567.5) == "1.234.567,5"
    assert format_number(1000) == "1.000"
    assert format_number(2.25) == "2,25"
    assert format_number(0) == "0"


def test_format_currency() -> None:
    assert format_currency(100000) == "Rp100.000"
    assert format_currency(-1500) == "-Rp1.500"
    assert format_currency(0) == "Rp0"


def test_format_dates() -> None:
    assert format_date(date(2024, 1, 5)) == "5 Januari 2024"
    assert month_name(8) == "Agustus"
