"""Endpoints for manual content sync and pipeline status."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from backend.app.core.config import get_settings
from backend.app.core.logging import get_logger
from backend.app.core.scheduler import ContentSyncScheduler, get_scheduler
from backend.app.core.security import require_admin
from backend.app.models import NewsStatusResponse, SyncResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["news"])


def get_sync_scheduler() -> ContentSyncScheduler:
    return get_scheduler()


@router.post("/news/sync", response_model=SyncResponse, dependencies=[Depends(require_admin)])
async def sync_news(
    scheduler: ContentSyncScheduler = Depends(get_sync_scheduler),
) -> SyncResponse:
    """Run one sync cycle now and report its outcome."""
    result = await scheduler.run_sync_now()
    return SyncResponse(
        success=result.success,
        message=result.message,
        articles_count=result.articles_count,
    )


@router.get("/news/status", response_model=NewsStatusResponse)
async def news_status(
    scheduler: ContentSyncScheduler = Depends(get_sync_scheduler),
) -> NewsStatusResponse:
    service = scheduler.sync_service
    store_status = await service.storage.get_status()

    return NewsStatusResponse(
        categories=store_status.categories,
        total_articles=store_status.total_articles,
        realtime_articles=store_status.realtime_articles,
        sync_state=service.state.value,
        last_sync_at=service.last_sync_at,
        news_api_configured=get_settings().has_news_api_key,
    )


@router.post(
    "/content/generate",
    response_model=SyncResponse,
    dependencies=[Depends(require_admin)],
)
async def generate_content(
    include_evergreen: bool = Query(default=True, alias="includeEvergreen"),
    scheduler: ContentSyncScheduler = Depends(get_sync_scheduler),
) -> SyncResponse:
    """Populate the store from the content generators only."""
    result = await scheduler.sync_service.generate_content(include_evergreen=include_evergreen)
    return SyncResponse(
        success=result.success,
        message=result.message,
        articles_count=result.articles_count,
    )
