"""
Unit tests for backend.app.core.logging module.

Covers logging configuration, correlation ID handling and the ASGI
correlation middleware.
"""

import logging
import uuid

import httpx
import pytest
import structlog
from fastapi import FastAPI

from backend.app.core.logging import (
    CorrelationIDMiddleware,
    add_correlation_id,
    configure_logging,
    generate_correlation_id,
    get_logger,
    log_exception,
)


class TestConfigureLogging:
    """Test cases for logging configuration."""

    def setup_method(self):
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def teardown_method(self):
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def test_configure_logging_sets_root_level(self):
        configure_logging(log_level="DEBUG", json_format=False)

        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level_falls_back_to_info(self):
        configure_logging(log_level="LOUD", json_format=True)

        assert logging.getLogger().level == logging.INFO

    def test_log_file_receives_json_events(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"

        configure_logging(log_level="INFO", json_format=True, log_file=str(log_file))
        get_logger("test").info("sync_cycle_started", articles=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "sync_cycle_started" in content
        assert '"articles": 3' in content
        assert "correlation_id" in content


class TestCorrelationId:
    def test_generate_correlation_id_is_uuid(self):
        value = generate_correlation_id()

        assert str(uuid.UUID(value)) == value

    def test_add_correlation_id_fills_missing_id(self):
        event = add_correlation_id(None, "info", {"event": "x"})

        assert uuid.UUID(event["correlation_id"])

    def test_add_correlation_id_keeps_existing_id(self):
        event = add_correlation_id(None, "info", {"event": "x", "correlation_id": "abc"})

        assert event["correlation_id"] == "abc"

    def test_get_logger_binds_correlation_id(self):
        logger = get_logger("test", correlation_id="req-1")

        assert logger is not None
        assert hasattr(logger, "info")


def test_log_exception_includes_type_and_message():
    captured = {}

    class Recorder:
        def error(self, event, **kwargs):
            captured["event"] = event
            captured.update(kwargs)

    log_exception(Recorder(), ValueError("boom"), {"path": "/api/articles"})

    assert captured["event"] == "exception_occurred"
    assert captured["exception_type"] == "ValueError"
    assert captured["exception_message"] == "boom"
    assert captured["path"] == "/api/articles"


@pytest.mark.asyncio
async def test_middleware_echoes_incoming_correlation_id():
    app = FastAPI()
    app.add_middleware(CorrelationIDMiddleware)

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/ping", headers={"X-Correlation-ID": "trace-123"})
        generated = await client.get("/ping")

    assert response.headers["x-correlation-id"] == "trace-123"
    assert uuid.UUID(generated.headers["x-correlation-id"])
