"""
Core utilities for the ChillVibes backend.

Configuration, structured logging, the request auth seam and the background
content sync scheduler.
"""

from .config import Settings, get_settings, validate_env_cli
from .logging import (
    configure_logging,
    get_logger,
    generate_correlation_id,
    CorrelationIDMiddleware,
    log_exception,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "validate_env_cli",
    # Logging
    "configure_logging",
    "get_logger",
    "generate_correlation_id",
    "CorrelationIDMiddleware",
    "log_exception",
]
