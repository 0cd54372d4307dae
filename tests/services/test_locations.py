"""Tests for the ownership-scoped location service."""

import pytest
from sqlalchemy import func, select

from placebook.core.errors import NotFound, ValidationError
from placebook.models.location import Location
from placebook.schemas.location import LocationWrite
from placebook.services import locations as location_service
from placebook.services.users import register_user


@pytest.fixture
def park():
    return LocationWrite(title="Park", location="Main St", tag="outdoor")


async def _users(session):
    alice = await register_user(session, "alice", "password1")
    bob = await register_user(session, "bob", "password2")
    return alice, bob


class TestCreateLocation:
    @pytest.mark.asyncio
    async def test_sets_owner_and_timestamp(self, session, park):
        alice, _ = await _users(session)

        location = await location_service.create_location(session, alice.id, park)

        assert location.id is not None
        assert location.owner_id == alice.id
        assert location.created_at is not None
        assert (location.title, location.location, location.tag) == ("Park", "Main St", "outdoor")

    @pytest.mark.asyncio
    async def test_tag_is_optional(self, session):
        alice, _ = await _users(session)

        location = await location_service.create_location(
            session, alice.id, LocationWrite(title="Home", location="Elm St")
        )

        assert location.tag is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,place",
        [("", "Main St"), ("Park", ""), ("   ", "Main St"), ("Park", "\t")],
    )
    async def test_blank_fields_are_rejected(self, session, title, place):
        alice, _ = await _users(session)

        with pytest.raises(ValidationError):
            await location_service.create_location(
                session, alice.id, LocationWrite(title=title, location=place)
            )

        assert await session.scalar(select(func.count()).select_from(Location)) == 0


class TestListLocations:
    @pytest.mark.asyncio
    async def test_newest_first(self, session):
        alice, _ = await _users(session)
        first = await location_service.create_location(
            session, alice.id, LocationWrite(title="L1", location="A")
        )
        second = await location_service.create_location(
            session, alice.id, LocationWrite(title="L2", location="B")
        )

        locations = await location_service.list_locations(session, alice.id)

        assert [location.id for location in locations] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_only_own_locations(self, session, park):
        alice, bob = await _users(session)
        await location_service.create_location(session, alice.id, park)
        theirs = await location_service.create_location(session, bob.id, park)

        locations = await location_service.list_locations(session, bob.id)

        assert [location.id for location in locations] == [theirs.id]

    @pytest.mark.asyncio
    async def test_repeated_listing_is_stable(self, session):
        alice, _ = await _users(session)
        for index in range(3):
            await location_service.create_location(
                session, alice.id, LocationWrite(title=f"L{index}", location="X")
            )

        first = await location_service.list_locations(session, alice.id)
        second = await location_service.list_locations(session, alice.id)

        assert [location.id for location in first] == [location.id for location in second]

    @pytest.mark.asyncio
    async def test_empty(self, session):
        alice, _ = await _users(session)

        assert await location_service.list_locations(session, alice.id) == []


class TestEditLocation:
    @pytest.mark.asyncio
    async def test_replaces_fields_and_keeps_identity(self, session, park):
        alice, _ = await _users(session)
        location = await location_service.create_location(session, alice.id, park)
        original = (location.id, location.owner_id, location.created_at)

        edited = await location_service.edit_location(
            session, alice.id, location.id, LocationWrite(title="Cafe", location="Side St")
        )

        assert (edited.title, edited.location, edited.tag) == ("Cafe", "Side St", None)
        assert (edited.id, edited.owner_id, edited.created_at) == original
        fetched = await location_service.get_location(session, alice.id, location.id)
        assert (fetched.title, fetched.location, fetched.tag) == ("Cafe", "Side St", None)

    @pytest.mark.asyncio
    async def test_other_owner_gets_not_found(self, session, park):
        alice, bob = await _users(session)
        location = await location_service.create_location(session, alice.id, park)

        with pytest.raises(NotFound):
            await location_service.edit_location(
                session, bob.id, location.id, LocationWrite(title="Mine", location="Now")
            )

        unchanged = await location_service.get_location(session, alice.id, location.id)
        assert (unchanged.title, unchanged.location, unchanged.tag) == ("Park", "Main St", "outdoor")

    @pytest.mark.asyncio
    async def test_missing_id_gets_not_found(self, session, park):
        alice, _ = await _users(session)

        with pytest.raises(NotFound):
            await location_service.edit_location(session, alice.id, 4242, park)


class TestDeleteLocation:
    @pytest.mark.asyncio
    async def test_returns_snapshot_and_removes(self, session, park):
        alice, _ = await _users(session)
        location = await location_service.create_location(session, alice.id, park)
        location_id = location.id

        deleted = await location_service.delete_location(session, alice.id, location_id)

        assert deleted.id == location_id
        assert deleted.title == "Park"
        with pytest.raises(NotFound):
            await location_service.get_location(session, alice.id, location_id)

    @pytest.mark.asyncio
    async def test_other_owner_gets_not_found(self, session, park):
        alice, bob = await _users(session)
        location = await location_service.create_location(session, alice.id, park)

        with pytest.raises(NotFound):
            await location_service.delete_location(session, bob.id, location.id)

        assert await location_service.get_location(session, alice.id, location.id) is location

    @pytest.mark.asyncio
    async def test_deleted_twice_gets_not_found(self, session, park):
        alice, _ = await _users(session)
        location = await location_service.create_location(session, alice.id, park)
        await location_service.delete_location(session, alice.id, location.id)

        with pytest.raises(NotFound):
            await location_service.delete_location(session, alice.id, location.id)
