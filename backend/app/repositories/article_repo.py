"""Repository helpers for article persistence."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from backend.app.content.base import ArticleDraft
from backend.app.core.logging import get_logger
from backend.app.db.models import Article, Comment, utcnow

logger = get_logger(__name__)

# Columns refreshed when an upsert hits an existing id. Flags and
# created_at are left as first written.
UPSERT_UPDATE_COLUMNS = ("title", "content", "excerpt", "image_url")

EDITABLE_COLUMNS = (
    "title",
    "content",
    "excerpt",
    "category",
    "subcategory",
    "image_url",
    "author",
    "is_draft",
    "is_featured",
    "is_realtime",
    "source_url",
    "tags",
)


def _dialect_insert(session: AsyncSession):
    """Return the dialect-specific insert construct supporting ON CONFLICT."""
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert
    if dialect == "sqlite":
        return sqlite.insert
    raise NotImplementedError(f"Upsert is not supported for dialect {dialect!r}")


class ArticleRepository:
    """Encapsulate article persistence logic."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.log = logger.bind(component="ArticleRepository")

    async def list_articles(
        self,
        category: Optional[str] = None,
        subcategory: Optional[str] = None,
        include_drafts: bool = False,
    ) -> List[Article]:
        """List articles newest first, optionally filtered."""
        stmt = select(Article)
        if category:
            stmt = stmt.where(Article.category == category)
        if subcategory:
            stmt = stmt.where(Article.subcategory == subcategory)
        if not include_drafts:
            stmt = stmt.where(Article.is_draft.is_(False))
        stmt = stmt.order_by(Article.created_at.desc(), Article.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, article_id: str) -> Optional[Article]:
        return await self.session.get(Article, article_id)

    async def list_featured(self, limit: int = 3) -> List[Article]:
        """Published articles, featured first, then newest."""
        stmt = (
            select(Article)
            .where(Article.is_draft.is_(False))
            .order_by(Article.is_featured.desc(), Article.created_at.desc(), Article.id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, values: Mapping[str, Any]) -> Article:
        article = Article(**{key: values[key] for key in values if key in EDITABLE_COLUMNS or key == "id"})
        self.session.add(article)
        await self.session.flush()
        self.log.info("article_created", article_id=article.id, category=article.category)
        return article

    async def update(self, article: Article, values: Mapping[str, Any]) -> Article:
        for key, value in values.items():
            if key in EDITABLE_COLUMNS:
                setattr(article, key, value)
        article.updated_at = utcnow()
        await self.session.flush()
        self.log.info("article_updated", article_id=article.id, fields=sorted(values))
        return article

    async def delete(self, article: Article) -> None:
        """Delete an article and its comments."""
        await self.session.execute(delete(Comment).where(Comment.article_id == article.id))
        await self.session.delete(article)
        await self.session.flush()
        self.log.info("article_deleted", article_id=article.id)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
        retry=retry_if_exception_type(OperationalError),
        reraise=True
    )
    async def upsert_chunk(self, drafts: Sequence[ArticleDraft]) -> int:
        """
        Insert-or-update one chunk of drafts keyed by id.

        On conflict only the content columns and ``updated_at`` change, so
        ``created_at`` of an existing row is preserved.
        """
        if not drafts:
            return 0

        now = utcnow()
        rows: List[Dict[str, Any]] = []
        for draft in drafts:
            row = draft.to_row()
            row["created_at"] = now
            row["updated_at"] = now
            rows.append(row)

        insert = _dialect_insert(self.session)
        stmt = insert(Article).values(rows)
        set_ = {column: getattr(stmt.excluded, column) for column in UPSERT_UPDATE_COLUMNS}
        set_["updated_at"] = now
        stmt = stmt.on_conflict_do_update(index_elements=[Article.id], set_=set_)

        await self.session.execute(stmt)
        self.log.debug("article_chunk_upserted", rows=len(rows))
        return len(rows)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
        retry=retry_if_exception_type(OperationalError),
        reraise=True
    )
    async def delete_created_before(self, cutoff: datetime, realtime_only: bool = False) -> int:
        """Remove articles (and their comments) created before ``cutoff``."""
        ids_stmt = select(Article.id).where(Article.created_at < cutoff)
        if realtime_only:
            ids_stmt = ids_stmt.where(Article.is_realtime.is_(True))
        result = await self.session.execute(ids_stmt)
        article_ids = list(result.scalars().all())
        if not article_ids:
            return 0

        await self.session.execute(delete(Comment).where(Comment.article_id.in_(article_ids)))
        await self.session.execute(delete(Article).where(Article.id.in_(article_ids)))
        return len(article_ids)

    async def count_by_category(self) -> Dict[str, int]:
        stmt = select(Article.category, func.count(Article.id)).group_by(Article.category)
        result = await self.session.execute(stmt)
        return {category: count for category, count in result.all()}

    async def count_realtime(self) -> int:
        stmt = select(func.count(Article.id)).where(Article.is_realtime.is_(True))
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
