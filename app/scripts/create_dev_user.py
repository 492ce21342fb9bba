# app/scripts/create_dev_user.py
"""Create (or reuse) a local user with a settings row and print a bearer token for it.

    python -m app.scripts.create_dev_user artist@example.com --name "Ada"
"""
import argparse
import asyncio
import logging

from sqlalchemy import select

from app.core.config import settings
from app.core.logging_config import configure_logging
from app.data.database import AsyncSessionLocal, close_db, engine, init_db
from app.models.database_models.user import User
from app.models.database_models.user_settings import UserSettings
from app.services.auth_services import create_access_token

logger = logging.getLogger(__name__)


async def get_or_create_user(email: str, name: str | None = None) -> User:
    async with AsyncSessionLocal() as db:
        result = await db.execute(select(User).filter(User.email == email))
        user = result.scalars().first()
        if user:
            logger.info(f"Reusing existing user {user.id}")
            return user

        user = User(email=email, name=name)
        db.add(user)
        await db.flush()
        db.add(UserSettings(user_id=user.id))
        await db.commit()
        await db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user


async def main(email: str, name: str | None) -> None:
    try:
        if engine.dialect.name == "sqlite":
            await init_db()
        user = await get_or_create_user(email, name)
        token = create_access_token({"id": user.id, "email": user.email, "name": user.name})
        print(f"Authorization: Bearer {token}")
    finally:
        await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a local ArtFlow user and print a bearer token.")
    parser.add_argument("email")
    parser.add_argument("--name", default=None)
    args = parser.parse_args()

    configure_logging(settings.DEBUG)
    asyncio.run(main(args.email, args.name))
