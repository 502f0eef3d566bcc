"""Core schemas for the application."""

from enum import Enum

from pydantic import BaseModel


class HealthCheck(BaseModel):
    """Schema for health check response."""
    service_name: str
    status: str


class FlowType(str, Enum):
    """Direction of money: category kind and transaction type."""
    INCOME = "pemasukan"
    EXPENSE = "pengeluaran"


class CoreError(str, Enum):
    """Structural problems reported by the calculations instead of raising."""
    INVALID_DATE_RANGE = "invalid_date_range"
    INVALID_MONTH = "invalid_month"
    NEGATIVE_PLANNED_AMOUNT = "negative_planned_amount"
    MISSING_CATEGORY = "missing_category"
