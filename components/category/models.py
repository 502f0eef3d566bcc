"""Category model for the database."""

from sqlalchemy import Column, Enum, Integer, String, Text
from sqlalchemy.orm import relationship

from components.core.database import Base
from components.core.schemas import FlowType


class Category(Base):
    """Income or expense classification of plans (kategori)."""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    kind = Column(Enum(FlowType, values_callable=lambda kinds: [k.value for k in kinds]), nullable=False)

    # Relationships
    plans = relationship("Plan", back_populates="category")
