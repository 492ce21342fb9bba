# app/models/prompt_models.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PromptCreate(CamelModel):
    title: str
    text: str
    order: int = 0
    saved: Optional[datetime] = None


class PromptUpdate(CamelModel):
    title: Optional[str] = None
    text: Optional[str] = None
    order: Optional[int] = None
    saved: Optional[datetime] = None


class PromptOrder(CamelModel):
    id: str
    order: int


class PromptRead(CamelModel):
    id: str
    user_id: str
    title: str
    text: str
    order: int
    saved: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class PromptResponse(BaseModel):
    success: bool = True
    data: PromptRead


class PromptListResponse(BaseModel):
    success: bool = True
    data: List[PromptRead]


class MessageResponse(BaseModel):
    success: bool = True
    message: str
