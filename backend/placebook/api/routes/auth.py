"""Registration and sign-in endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from placebook.core.config import Settings
from placebook.core.dependencies import get_app_settings, get_db
from placebook.schemas.envelope import Envelope
from placebook.schemas.user import Credentials, SignInRequest, UserPublic
from placebook.services.users import authenticate_user, register_user

router = APIRouter(tags=["auth"])

SIGN_IN_FAILED = "Incorrect username or password"


@router.post("/signup", response_model=Envelope[UserPublic], status_code=status.HTTP_201_CREATED)
async def signup(
    payload: Credentials,
    session: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> Envelope[UserPublic]:
    user = await register_user(
        session,
        payload.username,
        payload.password,
        min_password_length=settings.password_min_length,
        token_bytes=settings.access_token_bytes,
    )
    await session.commit()
    return Envelope(response=UserPublic.model_validate(user))


@router.post("/signin", response_model=Envelope[UserPublic | str])
async def signin(payload: SignInRequest, session: AsyncSession = Depends(get_db)) -> Envelope[UserPublic | str]:
    """Wrong credentials are an ordinary outcome: 200 with ``success: false``."""
    user = await authenticate_user(session, payload.username, payload.password)
    if not user:
        return Envelope(success=False, response=SIGN_IN_FAILED)
    return Envelope(response=UserPublic.model_validate(user))
