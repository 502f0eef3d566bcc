"""Application settings model for the database."""

from sqlalchemy import Column, Integer, String, Text

from components.core.database import Base


class AppSetting(Base):
    """Key/value settings printed on reports (pengaturan)."""
    __tablename__ = "app_settings"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(100), unique=True, nullable=False)
    value = Column(Text, nullable=False, default="")
