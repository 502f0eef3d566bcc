"""Plan model for the database."""

from sqlalchemy import Column, Integer, Date, DateTime, ForeignKey, Numeric, String, Text, func
from sqlalchemy.orm import relationship

from components.core.database import Base


class Plan(Base):
    """Planned activity (rencana kegiatan) with its budgeted amount."""
    __tablename__ = "plans"

    id = Column(Integer, primary_key=True, index=True)
    budget_year_id = Column(Integer, ForeignKey("budget_years.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    # Ekuivalen
    quantity_1 = Column(Numeric(12, 2), nullable=False)
    unit_1 = Column(String(50), nullable=False, default="paket")
    quantity_2 = Column(Numeric(12, 2), nullable=True)
    unit_2 = Column(String(50), nullable=True)
    quantity_3 = Column(Numeric(12, 2), nullable=True)
    unit_3 = Column(String(50), nullable=True)
    unit_price = Column(Numeric(15, 2), nullable=False)
    planned_amount = Column(Numeric(15, 2), nullable=False)  # Always recomputed from ekuivalen

    # Last realization write-back, may be stale
    total_realized = Column(Numeric(15, 2), nullable=True)
    percent_realized = Column(Numeric(15, 2), nullable=True)
    remaining = Column(Numeric(15, 2), nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    budget_year = relationship("BudgetYear", back_populates="plans")
    category = relationship("Category", back_populates="plans")
    transactions = relationship("Transaction", back_populates="plan")
