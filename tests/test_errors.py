import logging

import pytest

from app.core.config import settings
from app.models.database_models.prompt import Prompt
from app.services.database import prompt_database_services
from conftest import auth_header

pytestmark = pytest.mark.anyio


async def _boom(*args, **kwargs):
    raise RuntimeError("boom")


async def test_health_needs_no_auth(client):
    response = await client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["status"] == "ok"
    assert body["environment"] == "test"
    assert "timestamp" in body


async def test_unknown_route(client):
    response = await client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Route GET /api/nothing-here not found"}


async def test_unsupported_method_is_an_unknown_route(client, u1_headers):
    response = await client.patch("/api/prompts", headers=u1_headers)
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Route PATCH /api/prompts not found"}


async def test_unexpected_error_outside_production(client, u1_headers, monkeypatch):
    monkeypatch.setattr(prompt_database_services, "get_prompts", _boom)
    response = await client.get("/api/prompts", headers=u1_headers)
    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "boom"
    assert "RuntimeError" in body["stack"]


async def test_unexpected_error_in_production_is_opaque(client, u1_headers, monkeypatch):
    monkeypatch.setattr(prompt_database_services, "get_prompts", _boom)
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    response = await client.get("/api/prompts", headers=u1_headers)
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}


async def test_app_errors_carry_stack_in_development(client, u1_headers, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    response = await client.get("/api/prompts/missing", headers=u1_headers)
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "Prompt not found"
    assert "NotFoundError" in body["stack"]


async def test_foreign_key_violation_is_not_a_conflict(client):
    # Token for a user that was never provisioned: the prompt's foreign key cannot be satisfied
    headers = auth_header({"id": "ghost", "email": "ghost@example.com"})
    response = await client.post("/api/prompts", json={"title": "T", "text": "x"}, headers=headers)
    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "FOREIGN KEY" in body["error"]


async def test_foreign_key_violation_in_production_is_opaque(client, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    headers = auth_header({"id": "ghost", "email": "ghost@example.com"})
    response = await client.post("/api/prompts", json={"title": "T", "text": "x"}, headers=headers)
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}


async def test_unique_violation_is_a_conflict(client, u1_headers, monkeypatch):
    created = await client.post("/api/prompts", json={"title": "T", "text": "x"}, headers=u1_headers)
    existing_id = created.json()["data"]["id"]

    async def _create_with_existing_id(db, user_id, data):
        db.add(Prompt(id=existing_id, user_id=user_id, title=data.title, text=data.text))
        await db.commit()

    monkeypatch.setattr(prompt_database_services, "create_prompt", _create_with_existing_id)
    response = await client.post("/api/prompts", json={"title": "T", "text": "x"}, headers=u1_headers)
    assert response.status_code == 409
    assert response.json() == {"success": False, "error": "A record with this value already exists"}


async def test_request_logger_reports_server_errors(client, u1_headers, monkeypatch, caplog):
    monkeypatch.setattr(prompt_database_services, "get_prompts", _boom)
    with caplog.at_level(logging.INFO, logger="app.requests"):
        response = await client.get("/api/prompts", headers=u1_headers)
    assert response.status_code == 500
    messages = [record.getMessage() for record in caplog.records if record.name == "app.requests"]
    assert any(message.startswith("GET /api/prompts - 500 - ") for message in messages)


async def test_request_logger_reports_status_and_duration(client, caplog):
    with caplog.at_level(logging.INFO, logger="app.requests"):
        await client.get("/health")
    messages = [record.getMessage() for record in caplog.records if record.name == "app.requests"]
    assert "GET /health" in messages
    assert any(message.startswith("GET /health - 200 - ") for message in messages)
