"""
Integration tests for the health endpoint.

Tests verify the database, news API and scheduler checks and the HTTP status
codes (200 healthy or degraded, 503 unhealthy).
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from backend.app.db.models import Base
from backend.app.main import app

HEALTHY_SCHEDULER = {
    "status": "healthy",
    "message": "Scheduler is running",
    "jobs": []
}


async def get_health() -> httpx.Response:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get("/health")


@pytest.mark.asyncio
async def test_health_endpoint_returns_200_when_healthy(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("NEWS_API_KEY", "test-key")
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'health.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        with patch("backend.app.routers.health.get_engine", return_value=engine), \
             patch("backend.app.routers.health.check_scheduler", return_value=HEALTHY_SCHEDULER):
            response = await get_health()
    finally:
        await engine.dispose()

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert "python" in data["version"]
    components = data["components"]
    assert components["database"]["status"] == "healthy"
    assert components["news_api"]["status"] == "healthy"
    assert components["scheduler"]["status"] == "healthy"


@pytest.mark.asyncio
async def test_health_is_degraded_without_news_key_and_with_sync_disabled(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("NEWS_API_KEY", raising=False)
    monkeypatch.setenv("SYNC_ENABLED", "false")
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'health.db'}")

    try:
        with patch("backend.app.routers.health.get_engine", return_value=engine):
            response = await get_health()
    finally:
        await engine.dispose()

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["components"]["news_api"]["status"] == "warning"
    assert data["components"]["scheduler"]["status"] == "warning"


@pytest.mark.asyncio
async def test_health_endpoint_returns_503_when_database_down() -> None:
    failing_db = {
        "status": "unhealthy",
        "message": "Database connection failed",
        "error": "connection refused"
    }

    with patch("backend.app.routers.health.check_database", new=AsyncMock(return_value=failing_db)), \
         patch("backend.app.routers.health.check_scheduler", return_value=HEALTHY_SCHEDULER):
        response = await get_health()

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert response.json()["components"]["database"]["status"] == "unhealthy"
