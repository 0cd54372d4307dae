"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from placebook.core.config import Settings
from placebook.core.errors import Unauthorized
from placebook.models.user import User
from placebook.services.users import get_user_by_access_token

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.database.session() as session:
        yield session


async def get_current_user(
    authorization: str | None = Header(default=None),
    session: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the raw access token in the ``Authorization`` header to its user.

    Missing, blank and unknown tokens all fail the same way.
    """
    token = (authorization or "").strip()
    if not token:
        logger.debug("Rejected request without access token")
        raise Unauthorized()

    user = await get_user_by_access_token(session, token)
    if not user:
        logger.debug("Rejected request with unknown access token")
        raise Unauthorized()

    return user
