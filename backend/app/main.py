from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.core.config import get_settings
from backend.app.core.logging import CorrelationIDMiddleware, configure_logging, get_logger, log_exception
from backend.app.core.scheduler import get_scheduler
from backend.app.core.security import warn_if_admin_open
from backend.app.db.session import dispose_engine, init_db
from backend.app.routers import (
    articles_router,
    comments_router,
    health_router,
    news_router,
    settings_router,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle (startup and shutdown)."""
    # Startup
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_format=settings.log_json,
        log_file=settings.log_file,
    )
    warn_if_admin_open(settings)
    await init_db()

    scheduler = get_scheduler()
    if settings.sync_enabled:
        scheduler.start()
    else:
        logger.info("content_sync_disabled")
    yield
    # Shutdown
    scheduler.shutdown()
    await dispose_engine()


app = FastAPI(title="ChillVibes API", version="0.1.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIDMiddleware)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log_exception(logger, exc, {"path": request.url.path, "method": request.method})
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


app.include_router(articles_router)
app.include_router(comments_router)
app.include_router(settings_router)
app.include_router(news_router)
app.include_router(health_router)
