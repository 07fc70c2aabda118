"""
Configuration module for the ChillVibes backend.

This module provides the Settings class that loads and validates environment
variables. It uses pydantic-settings for type validation and default value
handling. A missing news API key is not an error: real-time fetching is simply
disabled.
"""

from __future__ import annotations

import sys
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Field names map case-insensitively to environment variables
    (``news_api_key`` <- ``NEWS_API_KEY``).
    """

    # Database Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/chillvibes.sqlite",
        description="SQLAlchemy database URL"
    )

    # News API Configuration
    news_api_key: Optional[str] = Field(
        default=None,
        description="NewsAPI key; real-time news fetching is disabled when unset"
    )
    news_api_base_url: str = Field(
        default="https://newsapi.org/v2",
        description="Base URL of the news search API"
    )
    news_api_language: str = Field(
        default="en",
        min_length=2,
        max_length=5,
        description="Language code passed with every news query"
    )
    news_api_page_size: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Page size requested per news query (first page only)"
    )
    news_api_per_query_limit: int = Field(
        default=3,
        ge=1,
        le=20,
        description="Maximum articles kept from a single news query"
    )
    news_api_query_delay_seconds: float = Field(
        default=0.1,
        ge=0.0,
        le=10.0,
        description="Courtesy delay between successive news queries"
    )
    news_api_timeout_seconds: float = Field(
        default=20.0,
        ge=1.0,
        le=120.0,
        description="Request timeout (in seconds) for news API calls"
    )
    news_featured_count: int = Field(
        default=4,
        ge=0,
        le=20,
        description="How many fetched news articles are randomly marked featured"
    )

    # Sync Scheduler Configuration
    sync_enabled: bool = Field(
        default=True,
        description="Start the periodic content sync scheduler with the app"
    )
    sync_interval_hours: int = Field(
        default=6,
        ge=1,
        le=168,
        description="Interval in hours between content sync cycles"
    )
    sync_startup_delay_seconds: int = Field(
        default=5,
        ge=0,
        le=600,
        description="Delay before the first sync cycle after startup"
    )
    retention_days: int = Field(
        default=7,
        ge=1,
        le=365,
        description="Articles older than this many days are removed by the sweep"
    )
    retention_realtime_only: bool = Field(
        default=False,
        description="Restrict the retention sweep to externally-sourced articles"
    )
    articles_per_category: int = Field(
        default=3,
        ge=1,
        le=20,
        description="Maximum articles kept per category in one sync cycle"
    )
    upsert_batch_size: int = Field(
        default=10,
        ge=1,
        le=500,
        description="Rows written per upsert statement"
    )
    content_random_seed: Optional[int] = Field(
        default=None,
        description="Seed for featured-flag randomness (unset = nondeterministic)"
    )

    # Auth seam
    admin_api_token: Optional[str] = Field(
        default=None,
        description="Bearer token required by admin endpoints (open when unset)"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of the development console format"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path of a rotating log file"
    )

    # CORS Configuration
    frontend_origins: str = Field(
        default="http://localhost:5173,http://127.0.0.1:5173",
        description="Comma-separated list of allowed frontend origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse frontend_origins into a list of allowed CORS origins."""
        return [origin.strip() for origin in self.frontend_origins.split(",") if origin.strip()]

    @property
    def has_news_api_key(self) -> bool:
        """Check if the news API key is available."""
        return bool(self.news_api_key and self.news_api_key.strip())

    @property
    def has_admin_token(self) -> bool:
        return bool(self.admin_api_token)


def get_settings() -> Settings:
    """
    Get application settings instance.

    Returns:
        Settings: Validated application settings

    Raises:
        ValidationError: If environment variables are invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        print(f"Configuration validation error: {e}", file=sys.stderr)
        raise


def validate_env_cli() -> None:
    """
    CLI command to validate environment configuration.

    This function can be called via: python -m backend.app.core.config --check
    """
    try:
        settings = get_settings()
        print("✅ Environment configuration is valid")
        print(f"Database URL: {settings.database_url}")
        print(f"Sync interval: {settings.sync_interval_hours} hours")
        print(f"Retention: {settings.retention_days} days"
              f" ({'realtime only' if settings.retention_realtime_only else 'all articles'})")
        print(f"News API key: {'✅ Set' if settings.has_news_api_key else '❌ Not set (real-time news disabled)'}")
        print(f"Admin token: {'✅ Set' if settings.has_admin_token else '❌ Not set (admin endpoints open)'}")
        print(f"Log level: {settings.log_level}")
    except ValidationError as e:
        print("❌ Environment configuration is invalid:")
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            print(f"  - {field}: {error['msg']}")
        sys.exit(1)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Configuration validation utility")
    parser.add_argument("--check", action="store_true", help="Validate environment configuration")

    args = parser.parse_args()

    if args.check:
        validate_env_cli()
    else:
        parser.print_help()
