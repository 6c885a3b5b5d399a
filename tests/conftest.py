"""Shared pytest fixtures for roomdesk tests."""
import sys
sys.dont_write_bytecode = True

from unittest.mock import patch  # noqa: E402

import pytest  # noqa: E402

from .helpers import (  # noqa: E402
    FakeDatabase,
    FakeRoomsRepository,
    FakeRoomTypesRepository,
    InMemoryTables,
)


@pytest.fixture
def tables():
    return InMemoryTables()


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def fake_repositories(tables):
    """Route every service's repository calls to the in-memory tables."""
    room_types_repo = FakeRoomTypesRepository(tables)
    rooms_repo = FakeRoomsRepository(tables)
    with patch("roomdesk.services.room_type_service.room_types_repository", room_types_repo), \
         patch("roomdesk.services.room_service.room_types_repository", room_types_repo), \
         patch("roomdesk.services.room_service.rooms_repository", rooms_repo):
        yield tables
