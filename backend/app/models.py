"""Pydantic request/response schemas for the REST API (camelCase on the wire)."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from backend.app.content.base import Category


class APIModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ArticleResponse(APIModel):
    id: str
    title: str
    content: str
    excerpt: str
    category: str
    subcategory: Optional[str] = None
    image_url: Optional[str] = None
    author: str
    is_draft: bool
    is_featured: bool
    is_realtime: bool
    source_url: Optional[str] = None
    tags: Optional[List[str]] = None
    created_at: datetime
    updated_at: datetime


class ArticleCreate(APIModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    excerpt: str = ""
    category: Category
    subcategory: Optional[str] = None
    image_url: Optional[str] = None
    author: str = "Admin"
    is_draft: bool = False
    is_featured: bool = False
    is_realtime: bool = False
    source_url: Optional[str] = None
    tags: Optional[List[str]] = None

    @model_validator(mode="after")
    def _realtime_needs_source(self) -> "ArticleCreate":
        if self.is_realtime and not self.source_url:
            raise ValueError("sourceUrl is required for realtime articles")
        return self


class ArticleUpdate(APIModel):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = None
    category: Optional[Category] = None
    subcategory: Optional[str] = None
    image_url: Optional[str] = None
    author: Optional[str] = None
    is_draft: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_realtime: Optional[bool] = None
    source_url: Optional[str] = None
    tags: Optional[List[str]] = None

    # Columns that may be omitted from an update but never cleared.
    REQUIRED_COLUMNS: ClassVar[tuple[str, ...]] = (
        "title",
        "content",
        "excerpt",
        "category",
        "author",
        "is_draft",
        "is_featured",
        "is_realtime",
    )

    @model_validator(mode="after")
    def _reject_null_required_columns(self) -> "ArticleUpdate":
        cleared = [
            to_camel(name)
            for name in self.REQUIRED_COLUMNS
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be null")
        return self


class CommentCreate(APIModel):
    content: str = Field(..., min_length=1)
    image_url: Optional[str] = None


class CommentResponse(APIModel):
    id: str
    article_id: str
    user_id: str
    content: str
    image_url: Optional[str] = None
    author_name: str
    author_avatar: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SiteSettingsResponse(APIModel):
    hero_background_url: Optional[str] = None
    text_color: Optional[str] = None
    text_size: Optional[str] = None
    updated_at: datetime


class SiteSettingsUpdate(APIModel):
    hero_background_url: Optional[str] = None
    text_color: Optional[str] = None
    text_size: Optional[str] = None


class SyncResponse(APIModel):
    success: bool
    message: str
    articles_count: int = 0


class NewsStatusResponse(APIModel):
    categories: Dict[str, int]
    total_articles: int
    realtime_articles: int
    sync_state: str
    last_sync_at: Optional[datetime] = None
    news_api_configured: bool
