# app/core/request_logger.py
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("app.requests")


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Logs each request on arrival and again with its status and duration."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        logger.info(f"{request.method} {request.url.path}")

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            # Unhandled errors escape call_next and are answered with a 500 further out
            duration_ms = int((time.perf_counter() - start) * 1000)
            if status_code >= 500:
                level = logging.ERROR
            elif status_code >= 400:
                level = logging.WARNING
            else:
                level = logging.INFO
            logger.log(level, f"{request.method} {request.url.path} - {status_code} - {duration_ms}ms")
