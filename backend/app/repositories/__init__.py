"""Repository layer exports."""

from .article_repo import ArticleRepository
from .comment_repo import CommentRepository
from .settings_repo import SiteSettingsRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "SiteSettingsRepository",
]
