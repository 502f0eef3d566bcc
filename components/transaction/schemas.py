"""Pydantic schemas for transaction data validation."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from components.category.schemas import Category
from components.core.schemas import FlowType
from components.finance.ekuivalen import EkuivalenFields


class PlanRef(BaseModel):
    """Linked plan as embedded in a transaction row."""
    id: int
    name: str
    category_id: int
    category: Optional[Category] = None

    class Config:
        from_attributes = True


class TransactionBase(EkuivalenFields):
    """Base transaction schema."""
    plan_id: Optional[int] = None
    transaction_date: date
    description: str = Field(..., min_length=1)
    type: FlowType
    evidence_url: Optional[str] = None


class TransactionCreate(TransactionBase):
    """Schema for transaction creation and update."""
    quantity_1: float = Field(..., gt=0)
    quantity_2: Optional[float] = Field(None, ge=0)
    quantity_3: Optional[float] = Field(None, ge=0)
    unit_price: float = Field(..., gt=0)


class Transaction(TransactionBase):
    """Schema for transaction response."""
    id: int
    plan: Optional[PlanRef] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @computed_field
    @property
    def actual_amount(self) -> float:
        return self.amount
