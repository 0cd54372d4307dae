"""Pydantic schemas for saved locations."""
from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class LocationWrite(BaseModel):
    """Fields a client may set when creating or editing a location.

    Unknown keys, an owner field included, are dropped.
    """

    title: str = Field(..., max_length=255)
    location: str = Field(..., max_length=1024)
    tag: str | None = Field(default=None, max_length=64)


class LocationRead(BaseModel):
    id: int
    title: str
    location: str
    tag: str | None
    owner_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite returns naive datetimes; they are stored as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
