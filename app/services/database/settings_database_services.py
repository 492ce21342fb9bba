# app/services/database/settings_database_services.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database_models.user_settings import UserSettings
from app.models.settings_models import SettingsUpdate


async def get_settings(db: AsyncSession, user_id: str) -> Optional[UserSettings]:
    result = await db.execute(select(UserSettings).filter(UserSettings.user_id == user_id))
    return result.scalars().first()


async def update_settings(db: AsyncSession, user_id: str, data: SettingsUpdate) -> UserSettings:
    """
    Replace dark_mode and language on the user's existing settings row.

    Rows are provisioned together with the account, so a missing row raises
    NoResultFound instead of being created here.
    """
    result = await db.execute(select(UserSettings).filter(UserSettings.user_id == user_id))
    user_settings = result.scalars().one()

    user_settings.dark_mode = data.dark_mode
    user_settings.language = data.language

    await db.commit()
    await db.refresh(user_settings)
    return user_settings


async def delete_settings(db: AsyncSession, user_id: str) -> None:
    result = await db.execute(select(UserSettings).filter(UserSettings.user_id == user_id))
    user_settings = result.scalars().one()
    await db.delete(user_settings)
    await db.commit()
