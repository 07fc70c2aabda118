"""Database utilities for the ChillVibes backend."""

from .session import get_engine, get_sessionmaker, get_async_session, init_db
from .models import Base, Article, Comment, SiteSettings

__all__ = [
    "get_engine",
    "get_sessionmaker",
    "get_async_session",
    "init_db",
    "Base",
    "Article",
    "Comment",
    "SiteSettings",
]
