"""Location endpoints; every route requires an access token."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from placebook.core.dependencies import get_current_user, get_db
from placebook.models.user import User
from placebook.schemas.envelope import Envelope, MessageEnvelope
from placebook.schemas.location import LocationRead, LocationWrite
from placebook.services import locations as location_service

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=Envelope[list[LocationRead]])
async def list_locations(
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Envelope[list[LocationRead]]:
    locations = await location_service.list_locations(session, current_user.id)
    return Envelope(response=[LocationRead.model_validate(location) for location in locations])


@router.post("", response_model=Envelope[LocationRead])
async def create_location(
    payload: LocationWrite,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Envelope[LocationRead]:
    location = await location_service.create_location(session, current_user.id, payload)
    await session.commit()
    return Envelope(response=LocationRead.model_validate(location))


@router.get("/{location_id}", response_model=Envelope[LocationRead])
async def get_location(
    location_id: int,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Envelope[LocationRead]:
    location = await location_service.get_location(session, current_user.id, location_id)
    return Envelope(response=LocationRead.model_validate(location))


@router.patch(
    "/{location_id}/edit",
    response_model=MessageEnvelope[LocationRead],
    status_code=status.HTTP_201_CREATED,
)
async def edit_location(
    location_id: int,
    payload: LocationWrite,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageEnvelope[LocationRead]:
    location = await location_service.edit_location(session, current_user.id, location_id, payload)
    updated = LocationRead.model_validate(location)
    await session.commit()
    return MessageEnvelope(response=updated, message="edited successfully")


@router.delete(
    "/{location_id}",
    response_model=MessageEnvelope[LocationRead],
    status_code=status.HTTP_201_CREATED,
)
async def delete_location(
    location_id: int,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageEnvelope[LocationRead]:
    location = await location_service.delete_location(session, current_user.id, location_id)
    snapshot = LocationRead.model_validate(location)
    await session.commit()
    return MessageEnvelope(response=snapshot, message="Deleted successfully")
