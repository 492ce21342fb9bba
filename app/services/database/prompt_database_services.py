# app/services/database/prompt_database_services.py
import logging
from datetime import datetime, timezone
from typing import List, Sequence

from sqlalchemy import asc, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.models.database_models.prompt import Prompt
from app.models.prompt_models import PromptCreate, PromptOrder, PromptUpdate

logger = logging.getLogger(__name__)

# Columns that cannot be cleared with an explicit null in a partial update
NON_NULLABLE_FIELDS = ("title", "text", "order")


async def get_prompts(db: AsyncSession, user_id: str) -> List[Prompt]:
    result = await db.execute(
        select(Prompt).filter(Prompt.user_id == user_id).order_by(asc(Prompt.created_at))
    )
    return result.scalars().all()


async def get_prompt_by_id(db: AsyncSession, prompt_id: str, user_id: str) -> Prompt:
    """Fetch a prompt owned by user_id. Someone else's prompt is reported as missing."""
    result = await db.execute(select(Prompt).filter(Prompt.id == prompt_id, Prompt.user_id == user_id))
    prompt = result.scalars().first()
    if not prompt:
        raise NotFoundError("Prompt not found")
    return prompt


async def create_prompt(db: AsyncSession, user_id: str, data: PromptCreate) -> Prompt:
    prompt = Prompt(**data.model_dump(), user_id=user_id)
    db.add(prompt)
    await db.commit()
    await db.refresh(prompt)
    return prompt


async def update_prompt(db: AsyncSession, prompt_id: str, user_id: str, data: PromptUpdate) -> Prompt:
    prompt = await get_prompt_by_id(db, prompt_id, user_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in NON_NULLABLE_FIELDS:
            continue
        setattr(prompt, field, value)

    await db.commit()
    await db.refresh(prompt)
    return prompt


async def delete_prompt(db: AsyncSession, prompt_id: str, user_id: str) -> None:
    prompt = await get_prompt_by_id(db, prompt_id, user_id)
    await db.delete(prompt)
    await db.commit()


async def reorder_prompts(db: AsyncSession, user_id: str, items: Sequence[PromptOrder]) -> List[Prompt]:
    """
    Apply a batch of (id, order) pairs in a single transaction.

    Every id must belong to user_id. If any pair matches no row the whole batch
    is rolled back and NotFoundError is raised, so either all orders change or
    none do. Returns the updated prompts in the order they were supplied.
    """
    if not items:
        return []

    try:
        for item in items:
            result = await db.execute(
                update(Prompt)
                .where(Prompt.id == item.id, Prompt.user_id == user_id)
                .values(order=item.order)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError("Prompt not found")
        await db.commit()
    except (NotFoundError, SQLAlchemyError):
        await db.rollback()
        logger.info(f"Reorder of {len(items)} prompts for user {user_id} rolled back")
        raise

    ids = [item.id for item in items]
    result = await db.execute(
        select(Prompt)
        .filter(Prompt.id.in_(ids), Prompt.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    by_id = {prompt.id: prompt for prompt in result.scalars().all()}
    return [by_id[prompt_id] for prompt_id in dict.fromkeys(ids)]


async def save_prompt(db: AsyncSession, prompt_id: str, user_id: str) -> Prompt:
    prompt = await get_prompt_by_id(db, prompt_id, user_id)
    prompt.saved = datetime.now(timezone.utc)
    await db.commit()
    await db.refresh(prompt)
    return prompt
