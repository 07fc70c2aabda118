from .articles import router as articles_router
from .comments import router as comments_router
from .health import router as health_router
from .news import router as news_router
from .settings import router as settings_router

__all__ = [
    "articles_router",
    "comments_router",
    "health_router",
    "news_router",
    "settings_router",
]
