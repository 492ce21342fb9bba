import os
import tempfile
from datetime import timedelta

# Settings and the engine are built at import time, so point them at a throwaway database first
_db_dir = tempfile.mkdtemp(prefix="artflow-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_db_dir}/artflow.db"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.data.database import AsyncSessionLocal, Base, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.models.database_models.user import User  # noqa: E402
from app.models.database_models.user_settings import UserSettings  # noqa: E402
from app.services.auth_services import create_access_token  # noqa: E402

USER_ONE = {"id": "u1", "email": "u1@example.com", "name": "Ada"}
USER_TWO = {"id": "u2", "email": "u2@example.com", "name": None}


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
async def database():
    """Fresh schema per test with two users; only u1 has a settings row."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        db.add_all([User(**USER_ONE), User(**USER_TWO)])
        await db.flush()
        db.add(UserSettings(id="s1", user_id=USER_ONE["id"], dark_mode=False, language="en"))
        await db.commit()

    yield

    await engine.dispose()


@pytest.fixture
async def db_session():
    async with AsyncSessionLocal() as db:
        yield db


@pytest.fixture
async def client():
    """Async HTTP client for the FastAPI app. Server errors come back as responses."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def make_token(user: dict, expires_delta: timedelta | None = None) -> str:
    return create_access_token(user, expires_delta=expires_delta)


def auth_header(user: dict = USER_ONE, expires_delta: timedelta | None = None) -> dict:
    return {"Authorization": f"Bearer {make_token(user, expires_delta)}"}


@pytest.fixture
def u1_headers():
    return auth_header(USER_ONE)


@pytest.fixture
def u2_headers():
    return auth_header(USER_TWO)
