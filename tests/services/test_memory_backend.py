"""Memory Backend — routes served from the process-wide in-memory repository.

Tests cover:
    - storage_backend="memory" bypasses the database entirely
    - state persists across requests within the process
    - readiness reports memory storage without a db_manager
"""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

import todolist.api.dependencies as deps
import todolist.api.routes.health as health_routes
import todolist.infrastructure.database as db_module
from todolist.config import Settings
from todolist.main import app
from todolist.services.todo_list_repository import InMemoryTodoListRepository


@pytest.fixture
async def memory_client(monkeypatch):
    settings = Settings(storage_backend="memory")
    monkeypatch.setattr(deps, "get_settings", lambda: settings)
    monkeypatch.setattr(health_routes, "get_settings", lambda: settings)
    monkeypatch.setattr(deps, "_memory_repository", InMemoryTodoListRepository())
    monkeypatch.setattr(db_module, "db_manager", None)
    app.state.write_lock = asyncio.Lock()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


async def test_items_persist_across_requests(memory_client):
    res = await memory_client.post("/api/v1/todo-items", json={
        "title": "Learn X", "description": "d", "category": "Work",
    })
    assert res.status_code == 201
    await memory_client.post(
        "/api/v1/todo-items/1/progressions",
        json={"date": "2024-01-01T00:00:00Z", "percent": "60"},
    )

    items = (await memory_client.get("/api/v1/todo-items")).json()["items"]
    assert [i["id"] for i in items] == [1]
    res = await memory_client.delete("/api/v1/todo-items/1")
    assert res.status_code == 409


async def test_readiness_reports_memory(memory_client):
    res = await memory_client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"storage": "memory"}
