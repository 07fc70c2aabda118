"""Repository helpers for article comments."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.logging import get_logger
from backend.app.db.models import Comment

logger = get_logger(__name__)


class CommentRepository:
    """Read/write operations for comments."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.log = logger.bind(component="CommentRepository")

    async def list_for_article(self, article_id: str) -> List[Comment]:
        """Comments of one article, newest first."""
        stmt = (
            select(Comment)
            .where(Comment.article_id == article_id)
            .order_by(Comment.created_at.desc(), Comment.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(
        self,
        article_id: str,
        user_id: str,
        content: str,
        author_name: str,
        author_avatar: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> Comment:
        comment = Comment(
            article_id=article_id,
            user_id=user_id,
            content=content,
            author_name=author_name,
            author_avatar=author_avatar,
            image_url=image_url,
        )
        self.session.add(comment)
        await self.session.flush()
        self.log.info("comment_created", comment_id=comment.id, article_id=article_id)
        return comment

    async def delete_owned(self, comment_id: str, user_id: str) -> bool:
        """Delete a comment only if ``user_id`` wrote it. Returns whether a row was removed."""
        comment = await self.session.get(Comment, comment_id)
        if comment is None or comment.user_id != user_id:
            return False
        await self.session.delete(comment)
        await self.session.flush()
        self.log.info("comment_deleted", comment_id=comment_id)
        return True
