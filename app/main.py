# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import prompt_routes, root_routes, settings_routes
from app.core.config import settings
from app.core.error_handlers import register_error_handlers
from app.core.logging_config import configure_logging
from app.core.request_logger import RequestLoggerMiddleware
from app.core.startup import shutdown_event, startup_event
from app.models.database_models.user import User  # noqa: F401  registers every mapper

configure_logging(settings.DEBUG)

app = FastAPI(title="ArtFlow Backend API", version=root_routes.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if not settings.is_production:
    app.add_middleware(RequestLoggerMiddleware)

register_error_handlers(app)

app.include_router(root_routes.router)
app.include_router(prompt_routes.router, prefix="/api/prompts", tags=["Prompts"])
app.include_router(settings_routes.router, prefix="/api/settings", tags=["Settings"])

@app.on_event("startup")
async def app_startup():
    await startup_event(app)

@app.on_event("shutdown")
async def app_shutdown():
    await shutdown_event(app)
