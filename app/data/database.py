# app/data/database.py
import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def _async_database_url(url: str) -> str:
    if url.startswith("postgresql://"):
        adapted = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        logger.warning("Adapted database URL to the asyncpg driver. Please update your configuration.")
        return adapted
    if url.startswith("sqlite://"):
        adapted = url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        logger.warning("Adapted database URL to the aiosqlite driver. Please update your configuration.")
        return adapted
    return url


async_database_url = _async_database_url(settings.DATABASE_URL)

engine = create_async_engine(async_database_url, echo=settings.DEBUG)

if engine.dialect.name == "sqlite":
    # SQLite leaves foreign keys off unless asked per connection
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


AsyncSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=engine, class_=AsyncSession, expire_on_commit=False
)

Base = declarative_base()


async def get_db():
    db = AsyncSessionLocal()
    try:
        yield db
    finally:
        await db.close()


async def init_db() -> None:
    """Create any missing tables. Migrations own the schema in deployed environments."""
    # Register every table on Base.metadata before creating
    from app.models.database_models import prompt, user, user_settings  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    await engine.dispose()
