"""Repository for application settings."""

from typing import Dict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.app_setting.models import AppSetting


class AppSettingRepository:
    """Repository for application settings."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_all(self) -> Dict[str, str]:
        """Get every setting as a flat ``key -> value`` mapping."""
        result = await self.session.execute(select(AppSetting))
        return {setting.key: setting.value for setting in result.scalars().all()}

    async def upsert(self, values: Dict[str, str]) -> Dict[str, str]:
        """Insert or update the given keys; other keys are left untouched."""
        result = await self.session.execute(
            select(AppSetting).where(AppSetting.key.in_(list(values)))
        )
        existing = {setting.key: setting for setting in result.scalars().all()}

        for key, value in values.items():
            if key in existing:
                existing[key].value = value
            else:
                self.session.add(AppSetting(key=key, value=value))
        await self.session.commit()
        return await self.get_all()
