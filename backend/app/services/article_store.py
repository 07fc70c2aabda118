"""
Article store used by the content sync pipeline.

Wraps the article repository with per-chunk transactions so a failing chunk
never rolls back its neighbours, and implements the retention sweep.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Protocol, Sequence

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backend.app.content.base import CATEGORY_ORDER, ArticleDraft
from backend.app.core.config import Settings, get_settings
from backend.app.db.models import Article, utcnow
from backend.app.db.session import get_sessionmaker
from backend.app.repositories import ArticleRepository

logger = structlog.get_logger(__name__)


@dataclass
class UpsertReport:
    """Outcome of writing one batch in chunks."""

    written: int = 0
    chunks: int = 0
    failed_chunks: int = 0
    errors: List[str] = field(default_factory=list)


@dataclass
class StoreStatus:
    categories: Dict[str, int]
    total_articles: int
    realtime_articles: int


class ArticleStorage(Protocol):
    """Storage operations the sync pipeline depends on."""

    async def get_articles(
        self,
        category: Optional[str] = None,
        subcategory: Optional[str] = None,
        include_drafts: bool = False,
    ) -> List[Article]: ...

    async def sync_news_articles(self, batch: Sequence[ArticleDraft]) -> UpsertReport: ...

    async def clear_old_news_articles(self) -> int: ...

    async def get_featured_articles(self, limit: int = 3) -> List[Article]: ...

    async def count_by_category(self) -> Dict[str, int]: ...

    async def get_status(self) -> StoreStatus: ...


def chunked(items: Sequence[ArticleDraft], size: int) -> List[Sequence[ArticleDraft]]:
    size = max(size, 1)
    return [items[start:start + size] for start in range(0, len(items), size)]


class ArticleStore:
    """Session-managing facade over ``ArticleRepository``."""

    def __init__(
        self,
        *,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.session_factory = session_factory or get_sessionmaker()
        self.log = logger.bind(component="ArticleStore")

    async def get_articles(
        self,
        category: Optional[str] = None,
        subcategory: Optional[str] = None,
        include_drafts: bool = False,
    ) -> List[Article]:
        async with self.session_factory() as session:
            repo = ArticleRepository(session)
            return await repo.list_articles(category, subcategory, include_drafts)

    async def get_featured_articles(self, limit: int = 3) -> List[Article]:
        async with self.session_factory() as session:
            return await ArticleRepository(session).list_featured(limit)

    async def sync_news_articles(self, batch: Sequence[ArticleDraft]) -> UpsertReport:
        """
        Upsert ``batch`` in chunks of ``upsert_batch_size``.

        Each chunk commits in its own transaction. A chunk that still fails
        after retries is logged and skipped; the remaining chunks proceed.
        """
        report = UpsertReport()
        for index, chunk in enumerate(chunked(list(batch), self.settings.upsert_batch_size)):
            report.chunks += 1
            try:
                async with self.session_factory() as session:
                    async with session.begin():
                        report.written += await ArticleRepository(session).upsert_chunk(chunk)
            except SQLAlchemyError as e:
                report.failed_chunks += 1
                report.errors.append(str(e))
                self.log.error(
                    "article_chunk_upsert_failed",
                    chunk_index=index,
                    chunk_size=len(chunk),
                    article_ids=[draft.id for draft in chunk],
                    error=str(e),
                )

        self.log.info(
            "articles_synced",
            written=report.written,
            chunks=report.chunks,
            failed_chunks=report.failed_chunks,
        )
        return report

    async def clear_old_news_articles(self, now: Optional[datetime] = None) -> int:
        """
        Delete articles created more than ``retention_days`` ago.

        Unless ``retention_realtime_only`` is set this also removes
        hand-authored and generated articles past the horizon.
        """
        now = now or utcnow()
        cutoff = now - timedelta(days=self.settings.retention_days)
        realtime_only = self.settings.retention_realtime_only
        if not realtime_only:
            self.log.warning(
                "retention_sweep_includes_editorial_articles",
                retention_days=self.settings.retention_days,
            )

        async with self.session_factory() as session:
            async with session.begin():
                removed = await ArticleRepository(session).delete_created_before(
                    cutoff, realtime_only=realtime_only
                )

        self.log.info(
            "old_articles_cleared",
            removed=removed,
            cutoff=cutoff.isoformat(),
            realtime_only=realtime_only,
        )
        return removed

    async def count_by_category(self) -> Dict[str, int]:
        async with self.session_factory() as session:
            counts = await ArticleRepository(session).count_by_category()
        return {category.value: counts.get(category.value, 0) for category in CATEGORY_ORDER}

    async def get_status(self) -> StoreStatus:
        async with self.session_factory() as session:
            repo = ArticleRepository(session)
            counts = await repo.count_by_category()
            realtime = await repo.count_realtime()

        categories = {category.value: counts.get(category.value, 0) for category in CATEGORY_ORDER}
        return StoreStatus(
            categories=categories,
            total_articles=sum(counts.values()),
            realtime_articles=realtime,
        )
