"""
Structured logging configuration for the ChillVibes backend.

This module sets up structlog on top of the standard library logging. It
configures correlation IDs, JSON or console rendering and an optional rotating
log file. Scheduler jobs and HTTP requests bind a correlation_id so that every
line of one sync cycle or one request can be grouped.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict, WrappedLogger

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3


def add_correlation_id(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if not already present.

    Events emitted outside of a request or job still get an ID so that the
    field is always present in JSON output.
    """
    if "correlation_id" not in event_dict:
        event_dict["correlation_id"] = str(uuid.uuid4())
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    json_format: bool = True,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Whether to use JSON formatting (True for production, False for dev)
        log_file: Optional path for a rotating file handler
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUP_COUNT,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if json_format:
        processors.extend([
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer()
        ])
    else:
        processors.extend([
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, correlation_id: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance with optional correlation ID.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracing
    """
    logger = structlog.get_logger(name)

    if correlation_id:
        logger = logger.bind(correlation_id=correlation_id)

    return logger


def generate_correlation_id() -> str:
    """Generate a new correlation ID for request or job tracing."""
    return str(uuid.uuid4())


class CorrelationIDMiddleware:
    """
    ASGI middleware binding a correlation ID to all log events of a request.

    The ID is taken from the incoming header when present, generated otherwise,
    and echoed back on the response.
    """

    def __init__(self, app: Any, header_name: str = "X-Correlation-ID"):
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = None
        for name, value in scope.get("headers", []):
            if name.decode().lower() == self.header_name.lower():
                correlation_id = value.decode()
                break

        if not correlation_id:
            correlation_id = generate_correlation_id()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

        async def send_with_correlation_id(message: Dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((
                    self.header_name.encode(),
                    correlation_id.encode()
                ))
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_with_correlation_id)


def log_exception(logger: structlog.stdlib.BoundLogger, exception: Exception, context: Optional[Dict[str, Any]] = None) -> None:
    """
    Log an exception with its type, message and traceback.

    Args:
        logger: Structured logger instance
        exception: Exception to log
        context: Additional context to include in log
    """
    log_context: Dict[str, Any] = {"exc_info": exception}
    if context:
        log_context.update(context)

    logger.error(
        "exception_occurred",
        exception_type=type(exception).__name__,
        exception_message=str(exception),
        **log_context
    )
