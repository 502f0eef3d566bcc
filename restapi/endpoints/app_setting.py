"""Application settings endpoints for the API."""

from typing import Dict
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from components.app_setting.repository import AppSettingRepository
from components.core.init_db import get_db
from components.user.models import User
from restapi.endpoints.auth import get_current_user

router = APIRouter(
    prefix="/settings",
    tags=["settings"],
)


@router.get("/", response_model=Dict[str, str])
async def read_settings(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get all settings as a flat mapping.

    Known keys: nama_aplikasi, nama_kota, nama_bendahara, nama_pimpinan.
    """
    return await AppSettingRepository(db).get_all()


@router.put("/", response_model=Dict[str, str])
async def update_settings(
    values: Dict[str, str],
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Insert or update the given settings and return all of them."""
    return await AppSettingRepository(db).upsert(values)
