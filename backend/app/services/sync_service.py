"""
Content sync service.

One sync cycle runs: retention sweep, then generators and the news source
concurrently, then per-category balancing, then a chunked upsert. Only one
cycle may be in flight; a request that arrives while another cycle is
running is skipped and logged.
"""

from __future__ import annotations

import asyncio
import random
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

import structlog

from backend.app.content.balancer import balance_by_category
from backend.app.content.base import ArticleDraft
from backend.app.content.generators import ContentGenerator
from backend.app.core.config import Settings, get_settings
from backend.app.db.models import utcnow
from backend.app.feeds.base import NewsSource
from backend.app.feeds.newsapi import NewsApiFetcher
from backend.app.services.article_store import ArticleStorage, ArticleStore

logger = structlog.get_logger(__name__)


class SyncState(str, Enum):
    IDLE = "idle"
    CLEANING = "cleaning"
    FETCHING = "fetching"
    BALANCING = "balancing"
    UPSERTING = "upserting"


@dataclass
class SyncResult:
    """Outcome of one sync cycle or content generation run."""

    success: bool
    message: str
    articles_count: int = 0
    skipped: bool = False
    generated: int = 0
    fetched: int = 0
    removed: int = 0
    failed_chunks: int = 0
    correlation_id: Optional[str] = None
    started_at: datetime = field(default_factory=utcnow)
    finished_at: Optional[datetime] = None


class ContentSyncService:
    """Runs sync cycles against an injected storage, generator and news source."""

    def __init__(
        self,
        storage: ArticleStorage,
        *,
        generator: Optional[ContentGenerator] = None,
        news_source: Optional[NewsSource] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.storage = storage
        rng = random.Random(self.settings.content_random_seed)
        self.generator = generator or ContentGenerator(rng)
        self.news_source = news_source or NewsApiFetcher(self.settings, rng=rng)
        self.state = SyncState.IDLE
        self.last_sync_at: Optional[datetime] = None
        self.last_result: Optional[SyncResult] = None

    @property
    def is_running(self) -> bool:
        return self.state is not SyncState.IDLE

    def _skip(self, log, correlation_id: str) -> SyncResult:
        log.warning("sync_cycle_skipped_already_running", state=self.state.value)
        return SyncResult(
            success=False,
            skipped=True,
            message=f"Sync already in progress ({self.state.value})",
            correlation_id=correlation_id,
            finished_at=utcnow(),
        )

    async def _generate(self, include_evergreen: bool) -> List[ArticleDraft]:
        return self.generator.generate_all(include_evergreen=include_evergreen)

    async def _balance_and_store(self, articles: List[ArticleDraft], result: SyncResult, log) -> None:
        self.state = SyncState.BALANCING
        balanced = balance_by_category(articles, self.settings.articles_per_category)
        log.info("sync_articles_balanced", candidates=len(articles), selected=len(balanced))

        self.state = SyncState.UPSERTING
        report = await self.storage.sync_news_articles(balanced)
        result.articles_count = report.written
        result.failed_chunks = report.failed_chunks

    async def run_cycle(self, correlation_id: Optional[str] = None) -> SyncResult:
        """
        Run one full sync cycle.

        Never raises: failures are logged and reported through the result.
        """
        correlation_id = correlation_id or str(uuid.uuid4())
        log = logger.bind(correlation_id=correlation_id, job="content_sync")
        if self.is_running:
            return self._skip(log, correlation_id)

        result = SyncResult(success=False, message="", correlation_id=correlation_id)
        self.state = SyncState.CLEANING
        log.info("sync_cycle_started")
        try:
            result.removed = await self.storage.clear_old_news_articles()

            self.state = SyncState.FETCHING
            generated, fetched = await asyncio.gather(
                self._generate(include_evergreen=False),
                self.news_source.fetch_all(),
            )
            result.generated = len(generated)
            result.fetched = len(fetched)
            log.info("sync_content_collected", generated=len(generated), fetched=len(fetched))

            await self._balance_and_store(generated + fetched, result, log)

            result.success = True
            result.message = f"Successfully synced {result.articles_count} articles"
            if result.failed_chunks:
                result.message += f" ({result.failed_chunks} chunk(s) failed)"
            self.last_sync_at = utcnow()
            log.info(
                "sync_cycle_completed",
                articles=result.articles_count,
                generated=result.generated,
                fetched=result.fetched,
                removed=result.removed,
                failed_chunks=result.failed_chunks,
            )
        except Exception as e:
            result.success = False
            result.message = f"Sync failed: {e}"
            log.error("sync_cycle_failed", error=str(e), state=self.state.value, exc_info=True)
        finally:
            self.state = SyncState.IDLE
            result.finished_at = utcnow()
            self.last_result = result

        return result

    async def generate_content(
        self,
        include_evergreen: bool = True,
        correlation_id: Optional[str] = None,
    ) -> SyncResult:
        """Populate the store from the generators only, without fetching news."""
        correlation_id = correlation_id or str(uuid.uuid4())
        log = logger.bind(correlation_id=correlation_id, job="content_generate")
        if self.is_running:
            return self._skip(log, correlation_id)

        result = SyncResult(success=False, message="", correlation_id=correlation_id)
        self.state = SyncState.FETCHING
        try:
            generated = await self._generate(include_evergreen=include_evergreen)
            result.generated = len(generated)
            await self._balance_and_store(generated, result, log)
            result.success = True
            result.message = f"Generated {result.articles_count} articles"
            log.info(
                "content_generation_completed",
                generated=result.generated,
                articles=result.articles_count,
                include_evergreen=include_evergreen,
            )
        except Exception as e:
            result.message = f"Content generation failed: {e}"
            log.error("content_generation_failed", error=str(e), exc_info=True)
        finally:
            self.state = SyncState.IDLE
            result.finished_at = utcnow()
            self.last_result = result

        return result


_sync_service: ContentSyncService | None = None


def get_sync_service() -> ContentSyncService:
    """Get the global sync service instance (singleton pattern)."""
    global _sync_service
    if _sync_service is None:
        _sync_service = ContentSyncService(ArticleStore())
    return _sync_service
