"""Security helpers for password hashing and access token generation."""
from __future__ import annotations

import secrets

from passlib.context import CryptContext


_password_context = CryptContext(schemes=["argon2"], deprecated="auto")

DEFAULT_TOKEN_BYTES = 128


class PasswordHasher:
    """Hash and verify user passwords using Argon2id."""

    @staticmethod
    def hash(password: str) -> str:
        return _password_context.hash(password)

    @staticmethod
    def verify(password: str, hashed: str) -> bool:
        return _password_context.verify(password, hashed)


def generate_access_token(nbytes: int = DEFAULT_TOKEN_BYTES) -> str:
    """Return an opaque bearer token made of ``nbytes`` random bytes, hex encoded."""

    return secrets.token_hex(nbytes)
