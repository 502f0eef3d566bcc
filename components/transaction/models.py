"""Transaction model for the database."""

from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import relationship

from components.core.database import Base
from components.core.schemas import FlowType


class Transaction(Base):
    """Actual cash movement (transaksi), optionally linked to a plan."""
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    plan_id = Column(Integer, ForeignKey("plans.id", ondelete="SET NULL"), nullable=True)
    transaction_date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=False)
    type = Column(Enum(FlowType, values_callable=lambda kinds: [k.value for k in kinds]), nullable=False)

    quantity_1 = Column(Numeric(12, 2), nullable=False)
    unit_1 = Column(String(50), nullable=False, default="paket")
    quantity_2 = Column(Numeric(12, 2), nullable=True)
    unit_2 = Column(String(50), nullable=True)
    quantity_3 = Column(Numeric(12, 2), nullable=True)
    unit_3 = Column(String(50), nullable=True)
    unit_price = Column(Numeric(15, 2), nullable=False)
    actual_amount = Column(Numeric(15, 2), nullable=False)

    evidence_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    plan = relationship("Plan", back_populates="transactions")
