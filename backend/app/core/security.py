"""
Request identity and admin authorization dependencies.

Admin endpoints take a bearer token compared against ``ADMIN_API_TOKEN``;
when no token is configured they are open and a warning is logged once at
startup. End-user identity is read from headers set by the upstream
authentication proxy.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.app.core.config import Settings, get_settings
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class CurrentUser:
    id: str
    name: str
    avatar: Optional[str] = None


def settings_dependency() -> Settings:
    return get_settings()


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(settings_dependency),
) -> None:
    """Reject the request unless it carries the configured admin token."""
    if not settings.has_admin_token:
        return
    if credentials is None or not secrets.compare_digest(
        credentials.credentials, settings.admin_api_token or ""
    ):
        logger.warning("admin_auth_rejected", has_credentials=credentials is not None)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    x_user_id: Optional[str] = Header(default=None),
    x_user_name: Optional[str] = Header(default=None),
    x_user_avatar: Optional[str] = Header(default=None),
) -> CurrentUser:
    """Resolve the signed-in user; 401 when the identity header is missing."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return CurrentUser(id=x_user_id, name=x_user_name or "Anonymous", avatar=x_user_avatar)


def warn_if_admin_open(settings: Settings) -> None:
    if not settings.has_admin_token:
        logger.warning("admin_endpoints_unprotected", hint="set ADMIN_API_TOKEN")
