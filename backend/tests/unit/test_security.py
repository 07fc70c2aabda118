"""Tests for the admin token and user identity dependencies."""

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from backend.app.core.config import Settings
from backend.app.core.security import get_current_user, require_admin


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


@pytest.mark.asyncio
async def test_admin_is_open_without_configured_token():
    settings = Settings(_env_file=None, admin_api_token=None)

    assert await require_admin(credentials=None, settings=settings) is None


@pytest.mark.asyncio
async def test_admin_requires_matching_token():
    settings = Settings(_env_file=None, admin_api_token="secret")

    with pytest.raises(HTTPException) as missing:
        await require_admin(credentials=None, settings=settings)
    with pytest.raises(HTTPException) as wrong:
        await require_admin(credentials=bearer("nope"), settings=settings)

    assert missing.value.status_code == 401
    assert wrong.value.status_code == 401
    assert await require_admin(credentials=bearer("secret"), settings=settings) is None


@pytest.mark.asyncio
async def test_current_user_requires_user_id_header():
    with pytest.raises(HTTPException) as exc:
        await get_current_user(x_user_id=None, x_user_name="Kai", x_user_avatar=None)

    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_current_user_defaults_name():
    user = await get_current_user(x_user_id="user-1", x_user_name=None, x_user_avatar=None)

    assert user.id == "user-1"
    assert user.name == "Anonymous"
