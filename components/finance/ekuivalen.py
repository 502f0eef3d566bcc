"""Ekuivalen calculator.

A plan or a transaction describes its money as up to three
``quantity x unit`` pairs and a unit price, e.g. 2 hari x 3 orang @ 50.000.
The total is always derived from those inputs and never entered by hand.
"""

import math
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import BaseModel

from components.finance.formatting import format_currency, format_number

RawNumber = Union[str, int, float, Decimal, None]

DEFAULT_UNIT = "paket"


def parse_quantity(raw: RawNumber, default: float) -> float:
    """Parse a quantity or price, falling back to ``default``.

    Missing, empty, unparseable, non-finite and non-positive input all give
    ``default``. Never raises.

    Parsing is strict: the whole string must be a number, so ``"5abc"`` is
    unparseable and gives ``default`` rather than 5.
    """
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(value) or value <= 0:
        return default
    return value


def compute_amount(
    quantity_1: RawNumber,
    quantity_2: RawNumber = None,
    quantity_3: RawNumber = None,
    unit_price: RawNumber = None,
) -> float:
    """Return ``q1 * q2 * q3 * unit_price``.

    ``q1`` and the price default to 0, ``q2`` and ``q3`` to 1, so a missing
    primary quantity or price gives an amount of 0. A zero result is a
    regular result and is always applied.
    """
    return (
        parse_quantity(quantity_1, 0.0)
        * parse_quantity(quantity_2, 1.0)
        * parse_quantity(quantity_3, 1.0)
        * parse_quantity(unit_price, 0.0)
    )


def format_breakdown(entity: Any) -> str:
    """Human readable ekuivalen, e.g. ``5 paket × 2 hari × @ Rp100.000``.

    Works on any object carrying ``quantity_N``/``unit_N``/``unit_price``
    attributes. Zero or missing quantities are left out.
    """
    parts = []
    for index in (1, 2, 3):
        quantity = parse_quantity(getattr(entity, f"quantity_{index}", None), 0.0)
        if quantity:
            unit = (getattr(entity, f"unit_{index}", None) or "").strip()
            parts.append(f"{format_number(quantity)} {unit}".strip())

    price = parse_quantity(getattr(entity, "unit_price", None), 0.0)
    if price:
        parts.append(f"@ {format_currency(price)}")
    return " × ".join(parts)


class EkuivalenFields(BaseModel):
    """Quantity/unit/price fields shared by plans and transactions."""
    quantity_1: Optional[float] = None
    unit_1: Optional[str] = DEFAULT_UNIT
    quantity_2: Optional[float] = None
    unit_2: Optional[str] = None
    quantity_3: Optional[float] = None
    unit_3: Optional[str] = None
    unit_price: Optional[float] = None

    @property
    def amount(self) -> float:
        """Recomputed on every access from the current field values."""
        return compute_amount(self.quantity_1, self.quantity_2, self.quantity_3, self.unit_price)

    @property
    def breakdown(self) -> str:
        return format_breakdown(self)
