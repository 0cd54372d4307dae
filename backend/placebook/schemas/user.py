"""Pydantic schemas for user operations."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Credentials(BaseModel):
    """Body of a sign-up request."""

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., max_length=128)


class SignInRequest(BaseModel):
    """Body of a sign-in request.

    No length limits: credentials that could never match are an ordinary
    failed sign-in, not a malformed request.
    """

    username: str
    password: str


class UserPublic(BaseModel):
    """What a client may see of its own account; never the password hash."""

    id: int
    username: str
    access_token: str

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
