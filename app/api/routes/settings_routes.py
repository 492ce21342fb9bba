# app/api/routes/settings_routes.py
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.data.database import get_db
from app.models.auth_models import AuthUser
from app.models.prompt_models import MessageResponse
from app.models.settings_models import SettingsRead, SettingsResponse, SettingsUpdate
from app.services.auth_services import get_current_user
from app.services.database import settings_database_services as settings_services

router = APIRouter()


@router.get("", response_model=Optional[SettingsRead])
@router.get("/", response_model=Optional[SettingsRead], include_in_schema=False)
async def get_settings(user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    """Return the bare settings object, or null when the user has none yet."""
    return await settings_services.get_settings(db, user.id)


@router.put("", response_model=SettingsResponse)
@router.put("/", response_model=SettingsResponse, include_in_schema=False)
async def update_settings(
    data: SettingsUpdate, user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)
):
    user_settings = await settings_services.update_settings(db, user.id, data)
    return {"success": True, "data": user_settings}


@router.delete("", response_model=MessageResponse)
@router.delete("/", response_model=MessageResponse, include_in_schema=False)
async def delete_settings(user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    await settings_services.delete_settings(db, user.id)
    return {"success": True, "message": "Settings deleted successfully"}
