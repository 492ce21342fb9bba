# app/services/auth_services.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from app.core.config import settings
from app.core.errors import ServerConfigurationError, UnauthorizedError
from app.models.auth_models import AuthUser

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    if not settings.JWT_SECRET:
        raise ServerConfigurationError()
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def _extract_bearer_token(request: Request) -> Optional[str]:
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        return None
    return auth_header[len(BEARER_PREFIX):]


def decode_access_token(token: str, secret: str) -> AuthUser:
    """
    Verify signature and expiry, then build the caller identity from the claims.

    Raises ExpiredSignatureError for expired tokens and JWTError for anything
    else that fails verification, including tokens without id/email claims.
    """
    payload = jwt.decode(token, secret, algorithms=[settings.JWT_ALGORITHM])
    try:
        return AuthUser(id=payload.get("id"), email=payload.get("email"), name=payload.get("name"))
    except ValidationError as e:
        raise JWTError("Invalid token payload") from e


async def get_current_user(request: Request) -> AuthUser:
    token = _extract_bearer_token(request)
    if token is None:
        raise UnauthorizedError("No token provided")

    if not settings.JWT_SECRET:
        logger.error("JWT_SECRET is not defined in environment variables")
        raise ServerConfigurationError()

    try:
        user = decode_access_token(token, settings.JWT_SECRET)
    except ExpiredSignatureError:
        raise UnauthorizedError("Token expired")
    except JWTError:
        raise UnauthorizedError("Invalid token")

    request.state.user = user
    return user


async def get_optional_user(request: Request) -> Optional[AuthUser]:
    token = _extract_bearer_token(request)
    if token is None or not settings.JWT_SECRET:
        return None

    try:
        user = decode_access_token(token, settings.JWT_SECRET)
    except JWTError as e:
        logger.debug(f"Ignoring invalid token on optional auth: {e}")
        return None

    request.state.user = user
    return user
