from datetime import date
from decimal import Decimal
from itertools import product

from components.finance.ekuivalen import (
    EkuivalenFields,
    compute_amount,
    format_breakdown,
    parse_quantity,
)
from components.plan.schemas import Plan

# (raw input, parsed value or None when the default applies)
RAW_QUANTITIES = [
    (None, None),
    ("", None),
    ("   ", None),
    ("abc", None),
    ("-3", None),
    ("0", None),
    ("nan", None),
    ("inf", None),
    ("2", 2.0),
    (" 4 ", 4.0),
    (2.5, 2.5),
    (Decimal("3"), 3.0),
]


def _plan(**fields) -> Plan:
    values = dict(
        id=1,
        budget_year_id=1,
        category_id=1,
        name="Pengadaan ATK",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
    )
    values.update(fields)
    return Plan(**values)


def test_parse_quantity_uses_default_for_bad_input() -> None:
    for raw, parsed in RAW_QUANTITIES:
        expected = 7.0 if parsed is None else parsed
        assert parse_quantity(raw, 7.0) == expected, raw


def test_compute_amount_never_raises_and_applies_defaults() -> None:
    for (q1, p1), (q2, p2), (q3, p3), (price, pp) in product(RAW_QUANTITIES, repeat=4):
        expected = (
            (0.0 if p1 is None else p1)
            * (1.0 if p2 is None else p2)
            * (1.0 if p3 is None else p3)
            * (0.0 if pp is None else pp)
        )
        amount = compute_amount(q1, q2, q3, price)
        assert amount == expected
        assert amount >= 0


def test_single_quantity_plan() -> None:
    plan = _plan(quantity_1=5, unit_1="paket", unit_price=100000)

    assert plan.planned_amount == 500000
    assert format_breakdown(plan) == "5 paket × @ Rp100.000"


def test_two_quantity_plan() -> None:
    plan = _plan(quantity_1=2, unit_1="hari", quantity_2=3, unit_2="orang", unit_price=50000)

    assert plan.planned_amount == 300000
    assert plan.breakdown == "2 hari × 3 orang × @ Rp50.000"


def test_missing_optional_quantities_count_as_one() -> None:
    assert compute_amount("4", "", None, "2500") == 10000
    assert compute_amount("4", "0", "0", "2500") == 10000


def test_trailing_text_is_not_a_number() -> None:
    assert parse_quantity("5abc", 1.0) == 1.0
    assert compute_amount("5abc", None, None, "100") == 0
    assert compute_amount("5", None, None, "100rb") == 0


def test_zero_amount_is_applied() -> None:
    fields = EkuivalenFields(quantity_1=5, unit_price=1000)
    assert fields.amount == 5000

    fields.quantity_1 = 0
    assert fields.amount == 0


def test_amount_follows_field_changes() -> None:
    fields = EkuivalenFields(quantity_1=2, unit_price=1000)
    fields.quantity_2 = 3
    fields.quantity_3 = 4
    assert fields.amount == 24000


def test_planned_amount_cannot_be_supplied() -> None:
    plan = Plan.model_validate({
        "id": 1,
        "budget_year_id": 1,
        "category_id": 1,
        "name": "Rapat",
        "start_date": "2024-01-01",
        "end_date": "2024-01-02",
        "quantity_1": 2,
        "unit_price": 1000,
        "planned_amount": 999999,
    })
    assert plan.planned_amount == 2000
    assert plan.model_dump()["planned_amount"] == 2000


def test_breakdown_skips_empty_parts() -> None:
    assert format_breakdown(EkuivalenFields()) == ""
    assert format_breakdown(EkuivalenFields(quantity_1=3, unit_1=None)) == "3"
    assert format_breakdown(EkuivalenFields(quantity_1=1.5, unit_1="bulan", quantity_3=2, unit_3="unit", unit_price=1250000)) == (
        "1,5 bulan × 2 unit × @ Rp1.250.000"
    )
