"""
In-memory article records shared by the content generators, the news fetcher
and the balancer.

An ``ArticleDraft`` is the shape every content source produces before it is
written to the article store.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

# Namespace for deterministic article ids derived from a stable key.
ARTICLE_ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "https://chillvibes.app/articles")


class Category(str, Enum):
    """Fixed set of site categories."""

    TECH = "tech"
    FINANCE = "finance"
    JIU_JITSU = "jiu-jitsu"
    SURF = "surf"


CATEGORY_ORDER: tuple[Category, ...] = (
    Category.TECH,
    Category.FINANCE,
    Category.JIU_JITSU,
    Category.SURF,
)


def stable_article_id(key: str) -> str:
    """Derive a permanent article id from a stable key (template slug, source URL)."""
    return str(uuid.uuid5(ARTICLE_ID_NAMESPACE, key))


@dataclass
class ArticleDraft:
    """Normalized article record, not yet persisted."""

    id: str
    title: str
    excerpt: str
    content: str
    category: Category
    author: str
    subcategory: Optional[str] = None
    image_url: Optional[str] = None
    is_draft: bool = False
    is_featured: bool = False
    is_realtime: bool = False
    source_url: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate required fields and invariants after initialization."""
        if not self.id:
            raise ValueError("ArticleDraft id is required")
        if not self.title:
            raise ValueError("ArticleDraft title is required")
        if not self.content:
            raise ValueError("ArticleDraft content is required")
        self.category = Category(self.category)
        if self.is_realtime and not self.source_url:
            raise ValueError("ArticleDraft source_url is required for realtime articles")

    def to_row(self) -> Dict[str, Any]:
        """Column mapping for the articles table (timestamps excluded)."""
        return {
            "id": self.id,
            "title": self.title,
            "excerpt": self.excerpt,
            "content": self.content,
            "category": self.category.value,
            "subcategory": self.subcategory,
            "image_url": self.image_url,
            "author": self.author,
            "is_draft": self.is_draft,
            "is_featured": self.is_featured,
            "is_realtime": self.is_realtime,
            "source_url": self.source_url,
            "tags": list(self.tags),
        }
