"""Repository helpers for the site settings singleton."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.logging import get_logger
from backend.app.db.models import SITE_SETTINGS_ID, SiteSettings, utcnow

logger = get_logger(__name__)

EDITABLE_FIELDS = ("hero_background_url", "text_color", "text_size")


class SiteSettingsRepository:
    """Load and update the single site settings row."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.log = logger.bind(component="SiteSettingsRepository")

    async def get_or_create(self) -> SiteSettings:
        """Return the settings row, inserting defaults on first access."""
        settings = await self.session.get(SiteSettings, SITE_SETTINGS_ID)
        if settings is None:
            settings = SiteSettings(id=SITE_SETTINGS_ID)
            self.session.add(settings)
            await self.session.flush()
            self.log.info("site_settings_created")
        return settings

    async def update(self, values: Mapping[str, Any]) -> SiteSettings:
        settings = await self.get_or_create()
        for key, value in values.items():
            if key in EDITABLE_FIELDS:
                setattr(settings, key, value)
        settings.updated_at = utcnow()
        await self.session.flush()
        self.log.info("site_settings_updated", fields=sorted(values))
        return settings
