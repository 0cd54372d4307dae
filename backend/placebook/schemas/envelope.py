"""Response envelope shared by every endpoint."""
from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    response: T


class MessageEnvelope(Envelope[T], Generic[T]):
    message: str
