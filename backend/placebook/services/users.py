"""User service functions for registration, sign-in and token lookup."""
from __future__ import annotations

import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from placebook.core.errors import ConflictError, ValidationError
from placebook.core.security import DEFAULT_TOKEN_BYTES, PasswordHasher, generate_access_token
from placebook.models.user import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


async def get_user_by_username(session: AsyncSession, username: str) -> User | None:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def get_user_by_access_token(session: AsyncSession, access_token: str) -> User | None:
    result = await session.execute(select(User).where(User.access_token == access_token))
    return result.scalar_one_or_none()


async def register_user(
    session: AsyncSession,
    username: str,
    password: str,
    min_password_length: int = MIN_PASSWORD_LENGTH,
    token_bytes: int = DEFAULT_TOKEN_BYTES,
) -> User:
    """Create a user with a hashed password and a fresh access token.

    Raises ``ValidationError`` before touching the store when the password is
    too short, and ``ConflictError`` when the store refuses the insert (the
    username is taken, or the write failed for another reason).
    """
    if len(password) < min_password_length:
        raise ValidationError(f"Password must be minimum {min_password_length} characters")

    user = User(
        username=username,
        password_hash=await run_in_threadpool(PasswordHasher.hash, password),
        access_token=generate_access_token(token_bytes),
    )
    session.add(user)
    try:
        await session.flush()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.warning("Could not create user %r: %s", username, exc.__class__.__name__)
        raise ConflictError("Could not create user") from exc

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


async def authenticate_user(session: AsyncSession, username: str, password: str) -> User | None:
    """Return the user when the credentials match, ``None`` otherwise."""
    user = await get_user_by_username(session, username)
    if not user:
        logger.info("Sign-in for unknown user %r", username)
        return None
    if not await run_in_threadpool(PasswordHasher.verify, password, user.password_hash):
        logger.info("Sign-in with wrong password for user %r", username)
        return None
    return user
