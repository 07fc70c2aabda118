"""End-to-end sync through the news endpoints with a temporary SQLite store."""

from __future__ import annotations

import random

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from backend.app.content.generators import ContentGenerator
from backend.app.core.config import Settings
from backend.app.core.scheduler import ContentSyncScheduler
from backend.app.core.security import settings_dependency
from backend.app.db.models import Base
from backend.app.db.session import get_async_session
from backend.app.feeds.newsapi import NewsApiFetcher
from backend.app.main import app
from backend.app.routers.news import get_sync_scheduler
from backend.app.services.article_store import ArticleStore, StoreStatus
from backend.app.services.sync_service import ContentSyncService

BITCOIN_ITEM = {
    "source": {"id": None, "name": "Crypto Wire"},
    "author": "A. Writer",
    "title": "Bitcoin Surges Past $100K",
    "description": "The largest cryptocurrency crossed a symbolic threshold on Monday.",
    "url": "https://news.test/bitcoin-100k",
    "urlToImage": None,
    "publishedAt": "2026-10-18T08:30:00Z",
    "content": "Bitcoin rallied sharply as institutional demand kept climbing. " * 3 + "[+2000 chars]",
}


def build_scheduler(session_factory, settings: Settings, transport: httpx.MockTransport | None = None):
    store = ArticleStore(session_factory=session_factory, settings=settings)
    client = httpx.AsyncClient(transport=transport) if transport is not None else None

    async def no_sleep(_: float) -> None:
        return None

    fetcher = NewsApiFetcher(settings, client=client, rng=random.Random(1), sleep=no_sleep, queries=("crypto",))
    service = ContentSyncService(
        store,
        generator=ContentGenerator(random.Random(1)),
        news_source=fetcher,
        settings=settings,
    )
    return ContentSyncScheduler(sync_service=service)


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'news.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def api(session_factory):
    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    app.dependency_overrides[settings_dependency] = lambda: Settings(_env_file=None, admin_api_token=None)
    try:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
            yield http_client
    finally:
        app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_sync_without_api_key_stores_eight_generated_articles(api, session_factory):
    settings = Settings(_env_file=None, news_api_key=None)
    scheduler = build_scheduler(session_factory, settings)
    app.dependency_overrides[get_sync_scheduler] = lambda: scheduler

    sync = await api.post("/api/news/sync")
    status = await api.get("/api/news/status")

    assert sync.status_code == 200
    assert sync.json() == {
        "success": True,
        "message": "Successfully synced 8 articles",
        "articlesCount": 8,
    }
    body = status.json()
    assert body["totalArticles"] == 8
    assert body["realtimeArticles"] == 0
    assert body["categories"] == {"tech": 2, "finance": 2, "jiu-jitsu": 2, "surf": 2}
    assert body["syncState"] == "idle"
    assert body["lastSyncAt"] is not None


@pytest.mark.asyncio
async def test_repeated_sync_does_not_duplicate_rows(api, session_factory):
    settings = Settings(_env_file=None, news_api_key=None)
    scheduler = build_scheduler(session_factory, settings)
    app.dependency_overrides[get_sync_scheduler] = lambda: scheduler

    await api.post("/api/news/sync")
    first = (await api.get("/api/articles")).json()
    await api.post("/api/news/sync")
    second = (await api.get("/api/articles")).json()

    assert len(second) == 8
    created_first = {a["id"]: a["createdAt"] for a in first}
    created_second = {a["id"]: a["createdAt"] for a in second}
    assert created_first == created_second


@pytest.mark.asyncio
async def test_sync_with_news_stores_classified_realtime_article(api, session_factory):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "ok", "totalResults": 1, "articles": [BITCOIN_ITEM]})

    settings = Settings(_env_file=None, news_api_key="test-key", news_api_base_url="https://news.test/v2")
    scheduler = build_scheduler(session_factory, settings, transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_sync_scheduler] = lambda: scheduler

    sync = await api.post("/api/news/sync")
    finance = (await api.get("/api/articles", params={"category": "finance"})).json()
    status = (await api.get("/api/news/status")).json()

    assert sync.json()["success"] is True
    realtime = [a for a in finance if a["isRealtime"]]
    assert len(realtime) == 1
    bitcoin = realtime[0]
    assert bitcoin["title"] == "Bitcoin Surges Past $100K"
    assert bitcoin["subcategory"] == "crypto"
    assert "cryptocurrency" in bitcoin["tags"]
    assert bitcoin["sourceUrl"] == "https://news.test/bitcoin-100k"
    assert bitcoin["author"] == "Crypto Wire"
    assert bitcoin["isFeatured"] is True
    assert status["realtimeArticles"] == 1
    assert status["categories"]["finance"] == 3


@pytest.mark.asyncio
async def test_generate_content_endpoint(api, session_factory):
    settings = Settings(_env_file=None, news_api_key=None, articles_per_category=5)
    scheduler = build_scheduler(session_factory, settings)
    app.dependency_overrides[get_sync_scheduler] = lambda: scheduler

    response = await api.post("/api/content/generate", params={"includeEvergreen": "true"})
    daily_only = await api.post("/api/content/generate", params={"includeEvergreen": "false"})

    assert response.json()["articlesCount"] == 20
    assert daily_only.json()["articlesCount"] == 8
    assert (await api.get("/api/news/status")).json()["totalArticles"] == 20


@pytest.mark.asyncio
async def test_sync_requires_admin_token_when_configured(api, session_factory):
    scheduler = build_scheduler(session_factory, Settings(_env_file=None, news_api_key=None))
    app.dependency_overrides[get_sync_scheduler] = lambda: scheduler
    app.dependency_overrides[settings_dependency] = lambda: Settings(_env_file=None, admin_api_token="secret")

    denied = await api.post("/api/news/sync")
    allowed = await api.post("/api/news/sync", headers={"Authorization": "Bearer secret"})

    assert denied.status_code == 401
    assert allowed.status_code == 200


@pytest.mark.asyncio
async def test_status_reports_the_sync_store_counts(api, session_factory):
    class CountingStore(ArticleStore):
        async def get_status(self) -> StoreStatus:
            return StoreStatus(
                categories={"tech": 4, "finance": 1, "jiu-jitsu": 0, "surf": 2},
                total_articles=7,
                realtime_articles=3,
            )

    settings = Settings(_env_file=None, news_api_key=None)
    service = ContentSyncService(
        CountingStore(session_factory=session_factory, settings=settings),
        generator=ContentGenerator(random.Random(1)),
        settings=settings,
    )
    app.dependency_overrides[get_sync_scheduler] = lambda: ContentSyncScheduler(sync_service=service)

    body = (await api.get("/api/news/status")).json()

    assert body["categories"] == {"tech": 4, "finance": 1, "jiu-jitsu": 0, "surf": 2}
    assert body["totalArticles"] == 7
    assert body["realtimeArticles"] == 3
