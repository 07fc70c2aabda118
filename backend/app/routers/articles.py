"""REST API endpoints for articles."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.logging import get_logger
from backend.app.core.security import require_admin
from backend.app.db.models import Article
from backend.app.db.session import get_async_session
from backend.app.models import ArticleCreate, ArticleResponse, ArticleUpdate
from backend.app.repositories import ArticleRepository

logger = get_logger(__name__)

router = APIRouter(prefix="/api/articles", tags=["articles"])


async def _get_or_404(repo: ArticleRepository, article_id: str) -> Article:
    article = await repo.get(article_id)
    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")
    return article


@router.get("", response_model=List[ArticleResponse])
async def list_articles(
    category: Optional[str] = None,
    subcategory: Optional[str] = None,
    include_drafts: bool = Query(default=False, alias="includeDrafts"),
    session: AsyncSession = Depends(get_async_session),
) -> List[Article]:
    """List articles newest first; drafts are hidden unless requested."""
    repo = ArticleRepository(session)
    return await repo.list_articles(category, subcategory, include_drafts)


@router.get("/featured", response_model=List[ArticleResponse])
async def list_featured_articles(
    limit: int = Query(default=3, ge=1, le=50),
    session: AsyncSession = Depends(get_async_session),
) -> List[Article]:
    return await ArticleRepository(session).list_featured(limit)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    session: AsyncSession = Depends(get_async_session),
) -> Article:
    return await _get_or_404(ArticleRepository(session), article_id)


@router.post(
    "",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_article(
    payload: ArticleCreate,
    session: AsyncSession = Depends(get_async_session),
) -> Article:
    values = payload.model_dump()
    values["category"] = payload.category.value
    article = await ArticleRepository(session).create(values)
    await session.commit()
    return article


@router.put(
    "/{article_id}",
    response_model=ArticleResponse,
    dependencies=[Depends(require_admin)],
)
async def update_article(
    article_id: str,
    payload: ArticleUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> Article:
    """Partial update; only fields present in the body change."""
    repo = ArticleRepository(session)
    article = await _get_or_404(repo, article_id)

    values = payload.model_dump(exclude_unset=True)
    if payload.category is not None:
        values["category"] = payload.category.value

    is_realtime = values.get("is_realtime", article.is_realtime)
    source_url = values.get("source_url", article.source_url)
    if is_realtime and not source_url:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="sourceUrl is required for realtime articles",
        )

    article = await repo.update(article, values)
    await session.commit()
    return article


@router.delete(
    "/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_article(
    article_id: str,
    session: AsyncSession = Depends(get_async_session),
) -> Response:
    repo = ArticleRepository(session)
    article = await _get_or_404(repo, article_id)
    await repo.delete(article)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
