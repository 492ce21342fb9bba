# app/core/error_handlers.py
import logging
import traceback
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from jose import ExpiredSignatureError, JWTError
from sqlalchemy.exc import IntegrityError, NoResultFound
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.errors import AppError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message, **extra})


def _stack(exc: Exception) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    extra = {"stack": _stack(exc)} if settings.is_development else {}
    return _error_response(exc.status_code, exc.message, **extra)


UNIQUE_VIOLATION_SQLSTATE = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    # Postgres drivers expose the SQLSTATE; SQLite only reports it in the message
    sqlstate = getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    return "UNIQUE constraint failed" in str(exc.orig)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    if not _is_unique_violation(exc):
        return await unexpected_error_handler(request, exc)
    logger.info(f"Unique constraint violation on {request.method} {request.url.path}: {exc.orig}")
    return _error_response(status.HTTP_409_CONFLICT, "A record with this value already exists")


async def no_result_handler(request: Request, exc: NoResultFound) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, "Record not found")


async def jwt_error_handler(request: Request, exc: JWTError) -> JSONResponse:
    if isinstance(exc, ExpiredSignatureError):
        return _error_response(status.HTTP_401_UNAUTHORIZED, "Token expired")
    return _error_response(status.HTTP_401_UNAUTHORIZED, "Invalid token")


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation failed",
        details=jsonable_encoder(exc.errors()),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unmatched paths and unsupported methods on a known path are both "no such route"
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _error_response(
            status.HTTP_404_NOT_FOUND, f"Route {request.method} {request.url.path} not found"
        )
    return _error_response(exc.status_code, str(exc.detail))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unexpected error: {exc} (url={request.url}, method={request.method}, "
        f"timestamp={datetime.now(timezone.utc).isoformat()})",
        exc_info=exc,
    )
    if settings.is_production:
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), stack=_stack(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(NoResultFound, no_result_handler)
    app.add_exception_handler(JWTError, jwt_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
