# app/api/routes/root_routes.py
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.models.auth_models import AuthUser
from app.services.auth_services import get_optional_user

API_VERSION = "1.0.0"

router = APIRouter(tags=["Root"])


@router.get("/health")
async def health():
    return {
        "success": True,
        "status": "ok",
        "message": "ArtFlow Backend API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
    }


@router.get("/")
async def read_root(user: Optional[AuthUser] = Depends(get_optional_user)):
    return {
        "success": True,
        "message": "ArtFlow Backend API",
        "version": API_VERSION,
        "endpoints": {"health": "/health", "api": "/api"},
        "authenticated": user is not None,
    }
