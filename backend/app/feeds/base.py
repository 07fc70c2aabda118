"""
Abstract base class for news sources.

This module defines the NewsSource interface the sync service depends on,
along with the shared model for raw provider items.
"""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from datetime import datetime
from dataclasses import dataclass
from typing import AsyncIterator, List, Optional
import httpx
import structlog

from backend.app.content.base import ArticleDraft

logger = structlog.get_logger()

# Default timeout for provider requests (seconds)
DEFAULT_FETCH_TIMEOUT = 20.0
# Default User-Agent for provider requests
DEFAULT_USER_AGENT = "ChillVibes-Sync/1.0"

# Placeholder the provider substitutes for withdrawn articles.
REMOVED_MARKER = "[Removed]"


@dataclass
class NewsItem:
    """Raw article as returned by a news provider, before mapping."""

    url: str
    title: str
    description: str
    content: str
    source_name: Optional[str] = None
    author: Optional[str] = None
    image_url: Optional[str] = None
    published_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.url:
            raise ValueError("NewsItem url is required")
        if not self.title:
            raise ValueError("NewsItem title is required")

    @property
    def is_removed(self) -> bool:
        return REMOVED_MARKER in self.title or REMOVED_MARKER in (self.description or "")


class NewsSource(ABC):
    """A provider of real-time articles for the sync cycle."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Return unique identifier for this source."""
        pass

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials for the provider are present."""
        pass

    @abstractmethod
    async def fetch_all(self) -> List[ArticleDraft]:
        """
        Fetch and map articles for every configured query.

        Never raises for provider failures: a failing query contributes no
        articles and a missing credential yields an empty list.
        """
        pass


class NewsFetchError(Exception):
    """Exception raised when a single provider request fails."""
    pass


@asynccontextmanager
async def http_client(
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> AsyncIterator[httpx.AsyncClient]:
    """
    Context manager for HTTP client with proper lifecycle management.

    This ensures the client is always closed after use, preventing connection leaks.
    """
    client = httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": user_agent},
        follow_redirects=True,
    )
    try:
        yield client
    finally:
        await client.aclose()
