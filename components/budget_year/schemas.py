"""Pydantic schemas for budget year data validation."""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from components.finance.period import validate_date_range


class BudgetYearBase(BaseModel):
    """Base budget year schema."""
    name: str = Field(..., min_length=1, max_length=50)
    start_date: date
    end_date: date
    is_active: bool = False


class BudgetYearCreate(BudgetYearBase):
    """Schema for budget year creation and update."""

    @model_validator(mode="after")
    def check_dates(self) -> "BudgetYearCreate":
        if not validate_date_range(self.start_date, self.end_date):
            raise ValueError("end_date must not be before start_date")
        return self


class BudgetYear(BudgetYearBase):
    """Schema for budget year response."""
    id: int

    class Config:
        from_attributes = True
