"""REST API endpoints for article comments."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.security import CurrentUser, get_current_user
from backend.app.db.models import Comment
from backend.app.db.session import get_async_session
from backend.app.models import CommentCreate, CommentResponse
from backend.app.repositories import ArticleRepository, CommentRepository

router = APIRouter(prefix="/api", tags=["comments"])


@router.get("/articles/{article_id}/comments", response_model=List[CommentResponse])
async def list_comments(
    article_id: str,
    session: AsyncSession = Depends(get_async_session),
) -> List[Comment]:
    return await CommentRepository(session).list_for_article(article_id)


@router.post(
    "/articles/{article_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    article_id: str,
    payload: CommentCreate,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_async_session),
) -> Comment:
    if await ArticleRepository(session).get(article_id) is None:
        raise HTTPException(status_code=404, detail="Article not found")

    comment = await CommentRepository(session).create(
        article_id=article_id,
        user_id=user.id,
        content=payload.content,
        author_name=user.name,
        author_avatar=user.avatar,
        image_url=payload.image_url,
    )
    await session.commit()
    return comment


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_async_session),
) -> Response:
    """Delete one of the caller's own comments; 404 otherwise."""
    deleted = await CommentRepository(session).delete_owned(comment_id, user.id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Comment not found")
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
