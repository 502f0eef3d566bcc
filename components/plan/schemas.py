"""Pydantic schemas for plan data validation."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field, computed_field, model_validator

from components.budget_year.schemas import BudgetYear
from components.category.schemas import Category
from components.finance.ekuivalen import EkuivalenFields
from components.finance.period import validate_date_range


class PlanBase(EkuivalenFields):
    """Base plan schema."""
    budget_year_id: int
    category_id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: date
    end_date: date


class PlanCreate(PlanBase):
    """Schema for plan creation and update.

    There is no ``planned_amount`` input, it is derived from the ekuivalen.
    """
    quantity_1: float = Field(..., gt=0)
    quantity_2: Optional[float] = Field(None, ge=0)
    quantity_3: Optional[float] = Field(None, ge=0)
    unit_price: float = Field(..., gt=0)

    @model_validator(mode="after")
    def check_dates(self) -> "PlanCreate":
        if not validate_date_range(self.start_date, self.end_date):
            raise ValueError("end_date must not be before start_date")
        return self


class Plan(PlanBase):
    """Schema for plan response."""
    id: int
    category: Optional[Category] = None
    budget_year: Optional[BudgetYear] = None

    # Cached realization, see PlanRepository.refresh_realization
    total_realized: Optional[float] = None
    percent_realized: Optional[float] = None
    remaining: Optional[float] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @computed_field
    @property
    def planned_amount(self) -> float:
        return self.amount
