"""Pydantic schemas for application settings."""

from typing import Dict

from pydantic import BaseModel

APP_NAME = "nama_aplikasi"
CITY = "nama_kota"
TREASURER = "nama_bendahara"
LEADER = "nama_pimpinan"


class ReportSettings(BaseModel):
    """Settings printed in report headers and signature blocks."""
    app_name: str = "SIKUANG"
    city: str = ""
    treasurer: str = ""
    leader: str = ""

    @classmethod
    def from_mapping(cls, values: Dict[str, str]) -> "ReportSettings":
        """Build from the flat key/value settings, ignoring blank values."""
        fields = {
            "app_name": values.get(APP_NAME),
            "city": values.get(CITY),
            "treasurer": values.get(TREASURER),
            "leader": values.get(LEADER),
        }
        return cls(**{name: value for name, value in fields.items() if value})
