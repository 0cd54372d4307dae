"""Schemas describing the API itself."""
from __future__ import annotations

from pydantic import BaseModel


class RouteDescriptor(BaseModel):
    path: str
    methods: list[str]
