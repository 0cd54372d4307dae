"""Service layer for locations, always scoped to the owning user."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from placebook.core.errors import NotFound, ValidationError
from placebook.models.location import Location
from placebook.schemas.location import LocationWrite

logger = logging.getLogger(__name__)


def _require_text(value: str, field: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field} must not be empty")
    return value


def _validate(data: LocationWrite) -> None:
    _require_text(data.title, "title")
    _require_text(data.location, "location")


async def list_locations(session: AsyncSession, owner_id: int) -> list[Location]:
    """Return every location of ``owner_id``, most recently created first."""
    result = await session.execute(
        select(Location)
        .where(Location.owner_id == owner_id)
        .order_by(Location.created_at.desc(), Location.id.desc())
    )
    return list(result.scalars().all())


async def get_location(session: AsyncSession, owner_id: int, location_id: int) -> Location:
    """Look a location up by id and owner together.

    A location that belongs to somebody else is reported exactly like one that
    does not exist.
    """
    result = await session.execute(
        select(Location).where(Location.id == location_id, Location.owner_id == owner_id)
    )
    location = result.scalar_one_or_none()
    if location is None:
        raise NotFound("Location not found")
    return location


async def create_location(session: AsyncSession, owner_id: int, data: LocationWrite) -> Location:
    _validate(data)
    location = Location(
        owner_id=owner_id,
        title=data.title,
        location=data.location,
        tag=data.tag,
    )
    session.add(location)
    await session.flush()
    logger.info("User %s created location %s", owner_id, location.id)
    return location


async def edit_location(
    session: AsyncSession, owner_id: int, location_id: int, data: LocationWrite
) -> Location:
    """Replace title, location and tag of an owned location."""
    _validate(data)
    location = await get_location(session, owner_id, location_id)
    location.title = data.title
    location.location = data.location
    location.tag = data.tag
    await session.flush()
    logger.info("User %s edited location %s", owner_id, location_id)
    return location


async def delete_location(session: AsyncSession, owner_id: int, location_id: int) -> Location:
    """Remove an owned location and return it as it was before deletion."""
    location = await get_location(session, owner_id, location_id)
    await session.delete(location)
    await session.flush()
    logger.info("User %s deleted location %s", owner_id, location_id)
    return location
