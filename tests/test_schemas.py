from datetime import date

import pytest
from pydantic import ValidationError

from components.app_setting.schemas import APP_NAME, CITY, ReportSettings
from components.budget_year.schemas import BudgetYearCreate
from components.core.schemas import FlowType
from components.plan.schemas import PlanCreate
from components.transaction.schemas import TransactionCreate


def _plan_input(**overrides):
    values = {
        "budget_year_id": 1,
        "category_id": 1,
        "name": "Pelatihan Kader",
        "start_date": date(2024, 3, 1),
        "end_date": date(2024, 3, 2),
        "quantity_1": 2,
        "unit_1": "hari",
        "quantity_2": 15,
        "unit_2": "orang",
        "unit_price": 75000,
    }
    values.update(overrides)
    return values


def test_plan_create_amount() -> None:
    plan = PlanCreate(**_plan_input())
    assert plan.amount == 2_250_000


def test_plan_create_rejects_inverted_dates() -> None:
    with pytest.raises(ValidationError):
        PlanCreate(**_plan_input(start_date=date(2024, 3, 5)))


def test_plan_create_requires_positive_quantity_and_price() -> None:
    with pytest.raises(ValidationError):
        PlanCreate(**_plan_input(quantity_1=0))
    with pytest.raises(ValidationError):
        PlanCreate(**_plan_input(unit_price=-1))


def test_transaction_create_requires_price() -> None:
    with pytest.raises(ValidationError):
        TransactionCreate(
            transaction_date=date(2024, 3, 1),
            description="Konsumsi",
            type=FlowType.EXPENSE,
            quantity_1=1,
        )


def test_transaction_type_values() -> None:
    transaction = TransactionCreate(
        transaction_date="2024-03-01",
        description="Donasi",
        type="pemasukan",
        quantity_1=1,
        unit_price=500000,
    )
    assert transaction.type == FlowType.INCOME
    assert transaction.amount == 500000


def test_budget_year_dates() -> None:
    BudgetYearCreate(name="TA 2024/2025", start_date=date(2024, 7, 1), end_date=date(2025, 6, 30))
    with pytest.raises(ValidationError):
        BudgetYearCreate(name="TA 2024/2025", start_date=date(2025, 7, 1), end_date=date(2025, 6, 30))


def test_report_settings_defaults() -> None:
    settings = ReportSettings.from_mapping({APP_NAME: "", CITY: "Malang", "lain": "x"})

    assert settings.app_name == "SIKUANG"
    assert settings.city == "Malang"
    assert settings.treasurer == ""
