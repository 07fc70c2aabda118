"""News source readers for real-time content."""

from .base import NewsSource, NewsItem, NewsFetchError
from .newsapi import NewsApiFetcher, DEFAULT_QUERIES

__all__ = ["NewsSource", "NewsItem", "NewsFetchError", "NewsApiFetcher", "DEFAULT_QUERIES"]
