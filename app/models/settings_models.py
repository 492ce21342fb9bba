# app/models/settings_models.py
from pydantic import BaseModel

from app.models.prompt_models import CamelModel


class SettingsUpdate(CamelModel):
    dark_mode: bool
    language: str


class SettingsRead(CamelModel):
    id: str
    dark_mode: bool
    language: str


class SettingsDetail(SettingsRead):
    user_id: str


class SettingsResponse(BaseModel):
    success: bool = True
    data: SettingsDetail
