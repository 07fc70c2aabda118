"""
NewsAPI reader for real-time articles.

Runs a fixed list of search queries against the ``/everything`` endpoint,
filters unusable results, maps each item to an ``ArticleDraft`` with keyword
classification and marks a random subset as featured.
"""

from __future__ import annotations

import asyncio
import random
import re
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, List, Optional, Sequence

import httpx
import structlog
from dateutil import parser as date_parser

from backend.app.content.base import ArticleDraft, stable_article_id
from backend.app.content.classify import classify_category, classify_subcategory, generate_tags
from backend.app.core.config import Settings, get_settings
from backend.app.feeds.base import REMOVED_MARKER, NewsFetchError, NewsItem, NewsSource, http_client

logger = structlog.get_logger(__name__)

DEFAULT_QUERIES: tuple[str, ...] = (
    'fintech OR "financial technology"',
    "cryptocurrency bitcoin ethereum",
    "startup funding venture capital",
    "AI artificial intelligence finance",
    "blockchain technology finance",
    "jiu-jitsu BJJ brazilian jiu-jitsu",
    "surfing surf competition waves",
    "mixed martial arts MMA UFC",
    "surf culture lifestyle surfboard",
    "martial arts training fitness",
)

FALLBACK_AUTHOR = "ChillVibes News"
MIN_CONTENT_LENGTH = 100
EXCERPT_LENGTH = 150
SHORT_CONTENT_LENGTH = 300

_TRUNCATION_MARKER = re.compile(r"\[\+\d+ chars\]$")


def clean_content(content: str, description: str) -> str:
    """Strip provider markers; fall back to the description when too short."""
    cleaned = _TRUNCATION_MARKER.sub("", content or "")
    cleaned = cleaned.replace(REMOVED_MARKER, "")
    if len(cleaned) < MIN_CONTENT_LENGTH and description:
        cleaned = description
    return cleaned


def build_excerpt(content: str) -> str:
    if len(content) > EXCERPT_LENGTH:
        return content[:EXCERPT_LENGTH] + "..."
    return content


def map_news_item(item: NewsItem) -> ArticleDraft:
    """Map one provider item to a real-time article draft."""
    source_name = item.source_name or FALLBACK_AUTHOR
    content = clean_content(item.content, item.description)
    excerpt = build_excerpt(content)
    if len(content) < SHORT_CONTENT_LENGTH:
        content += f"\n\nRead the full article at {source_name}: {item.url}"

    category = classify_category(item.title)
    return ArticleDraft(
        id=stable_article_id(item.url),
        title=item.title,
        excerpt=excerpt,
        content=content,
        category=category,
        subcategory=classify_subcategory(category, item.title, item.description),
        image_url=item.image_url,
        author=source_name,
        is_draft=False,
        is_featured=False,
        is_realtime=True,
        source_url=item.url,
        tags=generate_tags(category, item.title),
    )


def _text(raw: Dict[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    return value if isinstance(value, str) else None


def parse_news_item(raw: Dict[str, Any]) -> Optional[NewsItem]:
    """
    Build a NewsItem from a raw provider dict.

    Returns None for items lacking a string title, description, content or
    url, and for items the provider marked as removed.
    """
    title = _text(raw, "title")
    description = _text(raw, "description")
    content = _text(raw, "content")
    url = _text(raw, "url")
    if not (title and description and content and url):
        return None

    source = raw.get("source")
    published_at = None
    published_raw = _text(raw, "publishedAt")
    if published_raw:
        try:
            published_at = date_parser.isoparse(published_raw)
        except (ValueError, OverflowError):
            logger.debug("news_item_bad_published_at", url=url, value=published_raw)

    item = NewsItem(
        url=url,
        title=title,
        description=description,
        content=content,
        source_name=_text(source, "name") if isinstance(source, dict) else None,
        author=_text(raw, "author"),
        image_url=_text(raw, "urlToImage"),
        published_at=published_at,
    )
    if item.is_removed:
        return None
    return item


class NewsApiFetcher(NewsSource):
    """
    Fetches real-time articles from NewsAPI.

    The HTTP client, random source and sleep function are injectable so tests
    can use ``httpx.MockTransport`` and skip the courtesy delays.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        queries: Sequence[str] = DEFAULT_QUERIES,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = client
        self.rng = rng or random.Random()
        self._sleep = sleep
        self.queries = tuple(queries)
        self.log = logger.bind(component="NewsApiFetcher")

    @property
    def id(self) -> str:
        return "newsapi"

    @property
    def is_configured(self) -> bool:
        return self.settings.has_news_api_key

    @asynccontextmanager
    async def _http(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with http_client(timeout=self.settings.news_api_timeout_seconds) as client:
            yield client

    async def search(
        self,
        client: httpx.AsyncClient,
        query: str,
        language: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> List[NewsItem]:
        """
        Run one search request and return the usable items.

        Raises:
            NewsFetchError: On network errors, non-2xx responses, bad JSON or
                a provider status other than ``ok``.
        """
        size = page_size if page_size is not None else self.settings.news_api_page_size
        params = {
            "q": query,
            "language": language or self.settings.news_api_language,
            "sortBy": "publishedAt",
            "pageSize": str(min(max(size, 1), 100)),
            "apiKey": self.settings.news_api_key or "",
        }
        url = f"{self.settings.news_api_base_url.rstrip('/')}/everything"

        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise NewsFetchError(
                f"News API error: {e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.RequestError as e:
            raise NewsFetchError(f"Network error fetching news: {e}") from e
        except ValueError as e:
            raise NewsFetchError(f"Invalid JSON from news API: {e}") from e

        if not isinstance(payload, dict) or payload.get("status") != "ok":
            status = payload.get("status") if isinstance(payload, dict) else None
            raise NewsFetchError(f"News API returned status: {status}")

        raw_articles = payload.get("articles") or []
        items = []
        for raw in raw_articles:
            if not isinstance(raw, dict):
                continue
            item = parse_news_item(raw)
            if item is not None:
                items.append(item)

        self.log.debug(
            "news_query_results",
            query=query,
            total=len(raw_articles),
            usable=len(items),
        )
        return items

    async def fetch_query(
        self,
        query: str,
        language: Optional[str] = None,
        page_size: Optional[int] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> List[NewsItem]:
        """Like ``search`` but failures are logged and yield an empty list."""
        if not self.is_configured:
            self.log.warning("news_api_key_missing", query=query)
            return []
        try:
            if client is not None:
                return await self.search(client, query, language, page_size)
            async with self._http() as http:
                return await self.search(http, query, language, page_size)
        except NewsFetchError as e:
            self.log.warning("news_query_failed", query=query, error=str(e))
            return []

    def mark_featured(self, articles: List[ArticleDraft]) -> List[ArticleDraft]:
        """Randomly flag up to ``news_featured_count`` articles as featured."""
        count = min(self.settings.news_featured_count, len(articles))
        for article in self.rng.sample(articles, count):
            article.is_featured = True
        return articles

    async def fetch_all(self, queries: Optional[Sequence[str]] = None) -> List[ArticleDraft]:
        """
        Run every query in order and return the mapped, de-duplicated articles.

        Returns an empty list without any HTTP traffic when no key is configured.
        """
        if not self.is_configured:
            self.log.warning("news_api_key_missing_skipping_fetch")
            return []

        queries = tuple(queries) if queries is not None else self.queries
        per_query = self.settings.news_api_per_query_limit
        delay = self.settings.news_api_query_delay_seconds

        articles: List[ArticleDraft] = []
        seen_urls: set[str] = set()
        failed_queries = 0

        async with self._http() as client:
            for index, query in enumerate(queries):
                if index and delay:
                    await self._sleep(delay)
                try:
                    items = await self.search(client, query)
                except NewsFetchError as e:
                    failed_queries += 1
                    self.log.warning("news_query_failed", query=query, error=str(e))
                    continue

                for item in items[:per_query]:
                    if item.url in seen_urls:
                        continue
                    try:
                        article = map_news_item(item)
                    except (TypeError, ValueError) as e:
                        self.log.warning("news_item_skipped", query=query, url=item.url, error=str(e))
                        continue
                    seen_urls.add(item.url)
                    articles.append(article)

        self.mark_featured(articles)
        self.log.info(
            "news_fetch_complete",
            queries=len(queries),
            failed_queries=failed_queries,
            articles=len(articles),
            featured=sum(1 for article in articles if article.is_featured),
        )
        return articles


__all__ = [
    "DEFAULT_QUERIES",
    "NewsApiFetcher",
    "clean_content",
    "build_excerpt",
    "map_news_item",
    "parse_news_item",
]
