"""Tests for RoomTypeService against in-memory repositories."""

from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from roomdesk.domain.errors import RequestValidationFailed, RoomTypeNotFoundError
from roomdesk.services import room_type_service
from roomdesk.services.room_type_service import RoomTypeService

RESPONSE_FIELDS = {"id_roomtype", "room_type", "price", "created_at", "updated_at"}


@pytest.fixture
def service(fake_db, fake_repositories):
    return RoomTypeService(fake_db)


class TestCreate:
    def test_returns_persisted_row(self, service, tables):
        result = service.create({"room_type": "Deluxe", "price": 100})

        stored = tables.room_types[result["id_roomtype"]]
        assert set(result) == RESPONSE_FIELDS
        assert result["room_type"] == "Deluxe"
        assert result["price"] == Decimal("100")
        assert {k: stored[k] for k in RESPONSE_FIELDS} == result
        assert result["created_at"] == result["updated_at"]

    def test_invalid_input_touches_nothing(self, service, tables, fake_db):
        with pytest.raises(RequestValidationFailed):
            service.create({"room_type": "Deluxe"})
        assert tables.room_types == {}
        assert fake_db.txn_count == 0

    def test_logs_through_injected_logger(self, fake_db, fake_repositories):
        logger = MagicMock()
        RoomTypeService(fake_db, logger=logger).create({"room_type": "Twin", "price": 60})
        messages = [c.args[0] for c in logger.info.call_args_list]
        assert messages == ["creating room type", "room type created"]


class TestList:
    def test_excludes_soft_deleted(self, service, tables):
        active = tables.add_room_type("Standard")
        tables.add_room_type("Old", deleted=True)

        result = service.list()

        assert [r["id_roomtype"] for r in result] == [active["id_roomtype"]]
        assert all("deleted" not in r for r in result)

    def test_empty(self, service):
        assert service.list() == []


class TestGet:
    def test_found(self, service, tables):
        row = tables.add_room_type("Suite", price="300")
        result = service.get(row["id_roomtype"])
        assert result["room_type"] == "Suite"
        assert "deleted" not in result

    def test_missing(self, service):
        with pytest.raises(RoomTypeNotFoundError) as exc_info:
            service.get("nope")
        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "Room Type not found"

    def test_soft_deleted(self, service, tables):
        row = tables.add_room_type(deleted=True)
        with pytest.raises(RoomTypeNotFoundError):
            service.get(row["id_roomtype"])


class TestUpdate:
    def test_partial_update(self, service, tables):
        row = tables.add_room_type("Standard", price="80")

        result = service.update(row["id_roomtype"], {"price": 95})

        assert result["room_type"] == "Standard"
        assert result["price"] == Decimal("95")
        assert result["id_roomtype"] == row["id_roomtype"]
        assert result["created_at"] == row["created_at"]
        assert result["updated_at"] > row["updated_at"]

    def test_missing_fails_without_mutation(self, service, tables):
        with pytest.raises(RoomTypeNotFoundError):
            service.update("nope", {"price": 95})
        assert tables.room_types == {}

    def test_soft_deleted_fails_without_mutation(self, service, tables):
        row = tables.add_room_type("Old", price="10", deleted=True)
        with pytest.raises(RoomTypeNotFoundError):
            service.update(row["id_roomtype"], {"room_type": "Revived"})
        assert tables.room_types[row["id_roomtype"]]["room_type"] == "Old"

    def test_deleted_between_check_and_write(self, service, tables):
        row = tables.add_room_type("Old", price="10", deleted=True)
        with patch.object(room_type_service.room_types_repository, "count_room_types", return_value=1):
            with pytest.raises(RoomTypeNotFoundError):
                service.update(row["id_roomtype"], {"price": 12})
        assert tables.room_types[row["id_roomtype"]]["price"] == Decimal("10")

    def test_validation_runs_before_lookup(self, service, fake_db):
        with pytest.raises(RequestValidationFailed):
            service.update("nope", {})
        assert fake_db.txn_count == 0


class TestDelete:
    def test_soft_deletes(self, service, tables):
        row = tables.add_room_type()

        result = service.delete(row["id_roomtype"])

        assert result == {"message": "Deleted successfully"}
        assert row["id_roomtype"] in tables.room_types
        assert tables.room_types[row["id_roomtype"]]["deleted"] is True

    def test_second_delete_is_not_found(self, service, tables):
        row = tables.add_room_type()
        service.delete(row["id_roomtype"])
        with pytest.raises(RoomTypeNotFoundError):
            service.delete(row["id_roomtype"])

    def test_missing(self, service):
        with pytest.raises(RoomTypeNotFoundError):
            service.delete("nope")

    def test_deleted_row_disappears_from_reads(self, service, tables):
        row = tables.add_room_type()
        service.delete(row["id_roomtype"])
        assert service.list() == []
        with pytest.raises(RoomTypeNotFoundError):
            service.get(row["id_roomtype"])
