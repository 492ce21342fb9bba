# app/core/startup.py
import logging

from fastapi import FastAPI

from app.core.config import settings
from app.data.database import close_db, engine, init_db

logger = logging.getLogger(__name__)


async def startup_event(app: FastAPI):
    """
    Initialize resources on application startup.
    """
    try:
        if engine.dialect.name == "sqlite":
            await init_db()
            logger.info("SQLite schema created.")

        logger.info(f"Server is running on http://localhost:{settings.PORT}")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Health check: http://localhost:{settings.PORT}/health")
    except Exception as e:
        logger.error(f"Failed to startup: {e}")
        raise


async def shutdown_event(app: FastAPI):
    await close_db()
    logger.info("Database connections closed.")
