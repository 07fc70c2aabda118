"""
Health endpoint with component checks for monitoring.

Returns 200 when healthy or degraded, 503 when any component is unhealthy.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from backend.app.core.config import get_settings
from backend.app.core.logging import get_logger
from backend.app.core.scheduler import get_scheduler
from backend.app.db.session import get_engine

logger = get_logger(__name__)

router = APIRouter(tags=["health"])

APP_VERSION = "0.1.0"


async def check_database() -> Dict[str, Any]:
    """Check database connectivity."""
    try:
        engine = get_engine()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "message": "Database connection successful"
        }
    except Exception as exc:
        logger.error("health_check_database_failed", error=str(exc))
        return {
            "status": "unhealthy",
            "message": "Database connection failed",
            "error": str(exc)
        }


def check_news_api() -> Dict[str, Any]:
    """A missing key only disables real-time news, so it is a warning."""
    if get_settings().has_news_api_key:
        return {
            "status": "healthy",
            "message": "News API key configured"
        }
    return {
        "status": "warning",
        "message": "News API key not configured (real-time news disabled)"
    }


def check_scheduler() -> Dict[str, Any]:
    """
    Check scheduler status.

    A stopped scheduler is unhealthy only when sync is enabled.
    """
    try:
        scheduler = get_scheduler()
        job_status = scheduler.get_job_status()
        is_running = job_status.get("status") == "running"

        if is_running:
            return {
                "status": "healthy",
                "message": "Scheduler is running",
                "jobs": job_status.get("jobs", []),
                "sync_state": scheduler.sync_service.state.value,
            }
        if not get_settings().sync_enabled:
            return {
                "status": "warning",
                "message": "Scheduler disabled (SYNC_ENABLED=false)",
                "jobs": []
            }
        return {
            "status": "unhealthy",
            "message": "Scheduler is not running",
            "jobs": job_status.get("jobs", [])
        }
    except Exception as exc:
        logger.error("health_check_scheduler_failed", error=str(exc))
        return {
            "status": "unhealthy",
            "message": "Scheduler check failed",
            "error": str(exc)
        }


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> JSONResponse:
    """Comprehensive health check: database, news API config and scheduler."""
    start_time = datetime.now(timezone.utc)

    db_check = await check_database()
    news_check = check_news_api()
    scheduler_check = check_scheduler()

    checks = [db_check, news_check, scheduler_check]
    unhealthy_checks = [c for c in checks if c.get("status") == "unhealthy"]
    warning_checks = [c for c in checks if c.get("status") == "warning"]

    if unhealthy_checks:
        overall_status = "unhealthy"
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif warning_checks:
        overall_status = "degraded"
        status_code = status.HTTP_200_OK
    else:
        overall_status = "healthy"
        status_code = status.HTTP_200_OK

    end_time = datetime.now(timezone.utc)
    response_time_ms = (end_time - start_time).total_seconds() * 1000

    response_data = {
        "status": overall_status,
        "timestamp": end_time.isoformat(),
        "response_time_ms": round(response_time_ms, 2),
        "version": {
            "app": APP_VERSION,
            "python": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
        },
        "components": {
            "database": db_check,
            "news_api": news_check,
            "scheduler": scheduler_check
        }
    }

    logger.info(
        "health_check_completed",
        overall_status=overall_status,
        response_time_ms=response_time_ms,
        unhealthy_count=len(unhealthy_checks),
        warning_count=len(warning_checks)
    )

    return JSONResponse(
        status_code=status_code,
        content=response_data
    )
