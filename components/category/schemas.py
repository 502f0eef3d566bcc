"""Pydantic schemas for category data validation."""

from typing import Optional

from pydantic import BaseModel, Field

from components.core.schemas import FlowType


class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    kind: FlowType


class CategoryCreate(CategoryBase):
    """Schema for category creation."""
    pass


class Category(CategoryBase):
    id: int

    class Config:
        from_attributes = True
