"""Tests for the environment template configuration."""

from pathlib import Path
from dotenv import dotenv_values


REQUIRED_KEYS: tuple[str, ...] = (
    "DATABASE_URL",
    "NEWS_API_KEY",
    "NEWS_API_BASE_URL",
    "SYNC_ENABLED",
    "SYNC_INTERVAL_HOURS",
    "RETENTION_DAYS",
    "RETENTION_REALTIME_ONLY",
    "ARTICLES_PER_CATEGORY",
    "UPSERT_BATCH_SIZE",
    "ADMIN_API_TOKEN",
    "LOG_LEVEL",
    "FRONTEND_ORIGINS",
)


def test_env_example_contains_required_keys() -> None:
    """Ensure `.env.example` defines all required keys with placeholder values."""
    # Arrange
    project_root = Path(__file__).resolve().parents[3]
    env_path = project_root / ".env.example"

    # Act
    values: dict[str, str | None] = dotenv_values(str(env_path))
    missing_keys = {key for key in REQUIRED_KEYS if key not in values}
    empty_keys = {
        key
        for key in REQUIRED_KEYS
        if not (values.get(key) or "").strip()
    }

    # Assert
    assert env_path.exists(), "The `.env.example` template is missing at the repository root."
    assert not missing_keys, (
        "The environment template is missing required keys: "
        f"{', '.join(sorted(missing_keys))}."
    )
    assert not empty_keys, (
        "The environment template contains empty placeholders for: "
        f"{', '.join(sorted(empty_keys))}."
    )
