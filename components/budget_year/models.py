"""Budget year model for the database."""

from sqlalchemy import Boolean, Column, Date, Integer, String
from sqlalchemy.orm import relationship

from components.core.database import Base


class BudgetYear(Base):
    """Fiscal period (tahun anggaran); at most one is active."""
    __tablename__ = "budget_years"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)  # e.g. "TA 2024/2025"
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    is_active = Column(Boolean, nullable=False, default=False)

    plans = relationship("Plan", back_populates="budget_year")
