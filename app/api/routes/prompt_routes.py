# app/api/routes/prompt_routes.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.data.database import get_db
from app.models.auth_models import AuthUser
from app.models.prompt_models import (
    MessageResponse,
    PromptCreate,
    PromptListResponse,
    PromptOrder,
    PromptResponse,
    PromptUpdate,
)
from app.services.auth_services import get_current_user
from app.services.database import prompt_database_services as prompt_services

router = APIRouter()


@router.get("", response_model=PromptListResponse)
@router.get("/", response_model=PromptListResponse, include_in_schema=False)
async def get_prompts(user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    """List the caller's prompts, oldest first."""
    prompts = await prompt_services.get_prompts(db, user.id)
    return {"success": True, "data": prompts}


@router.post("", response_model=PromptResponse)
@router.post("/", response_model=PromptResponse, include_in_schema=False)
async def create_prompt(
    data: PromptCreate, user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)
):
    prompt = await prompt_services.create_prompt(db, user.id, data)
    return {"success": True, "data": prompt}


# Registered ahead of /{prompt_id} so "reorder" is never taken for an id
@router.put("/reorder", response_model=PromptListResponse)
async def reorder_prompts(
    items: List[PromptOrder], user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)
):
    """Apply a batch of {id, order} pairs atomically."""
    prompts = await prompt_services.reorder_prompts(db, user.id, items)
    return {"success": True, "data": prompts}


@router.post("/save/{prompt_id}", response_model=PromptResponse)
async def save_prompt(prompt_id: str, user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    """Stamp the prompt's saved time."""
    prompt = await prompt_services.save_prompt(db, prompt_id, user.id)
    return {"success": True, "data": prompt}


@router.get("/{prompt_id}", response_model=PromptResponse)
async def get_prompt(prompt_id: str, user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    prompt = await prompt_services.get_prompt_by_id(db, prompt_id, user.id)
    return {"success": True, "data": prompt}


@router.put("/{prompt_id}", response_model=PromptResponse)
async def update_prompt(
    prompt_id: str,
    data: PromptUpdate,
    user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    prompt = await prompt_services.update_prompt(db, prompt_id, user.id, data)
    return {"success": True, "data": prompt}


@router.delete("/{prompt_id}", response_model=MessageResponse)
async def delete_prompt(prompt_id: str, user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    await prompt_services.delete_prompt(db, prompt_id, user.id)
    return {"success": True, "message": "Prompt deleted successfully"}
