"""REST API endpoints for site display settings."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.security import require_admin
from backend.app.db.models import SiteSettings
from backend.app.db.session import get_async_session
from backend.app.models import SiteSettingsResponse, SiteSettingsUpdate
from backend.app.repositories import SiteSettingsRepository

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=SiteSettingsResponse)
async def get_site_settings(
    session: AsyncSession = Depends(get_async_session),
) -> SiteSettings:
    """Return the site settings, creating the default row on first access."""
    settings = await SiteSettingsRepository(session).get_or_create()
    await session.commit()
    return settings


@router.put("", response_model=SiteSettingsResponse, dependencies=[Depends(require_admin)])
async def update_site_settings(
    payload: SiteSettingsUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> SiteSettings:
    settings = await SiteSettingsRepository(session).update(payload.model_dump(exclude_unset=True))
    await session.commit()
    return settings
