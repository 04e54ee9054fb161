"""
Tests for the JSON file booking store.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from studio_booker.application.exceptions import NotFound, StoreUnavailable
from studio_booker.domain.entities.booking import BookingStatus
from studio_booker.infrastructure.store.json_store import JsonBookingStore

from conftest import make_new_booking


def test_json_store_persists_across_instances():
    """Bookings written by one store instance are read back by a fresh one."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonBookingStore(data_dir=tmpdir)
        created = store.create(make_new_booking())
        store.update_status(created.id, BookingStatus.approved)

        reopened = JsonBookingStore(data_dir=tmpdir)
        bookings = reopened.list_all()

        assert len(bookings) == 1
        assert bookings[0].id == 1
        assert bookings[0].status == BookingStatus.approved
        assert bookings[0].start_time == "14:00"


def test_json_store_next_id_survives_restart():
    with tempfile.TemporaryDirectory() as tmpdir:
        JsonBookingStore(data_dir=tmpdir).create(make_new_booking())
        second = JsonBookingStore(data_dir=tmpdir).create(make_new_booking(start_time="18:00"))
        assert second.id == 2


def test_json_store_list_by_date():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonBookingStore(data_dir=tmpdir)
        store.create(make_new_booking(date="2024-06-01"))
        store.create(make_new_booking(date="2024-06-03"))

        assert [b.date for b in store.list_by_date("2024-06-03")] == ["2024-06-03"]


def test_json_store_unknown_id():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonBookingStore(data_dir=tmpdir)
        store.create(make_new_booking())

        with pytest.raises(NotFound):
            store.update_status(7, BookingStatus.rejected)
        assert store.list_all()[0].status == BookingStatus.pending


def test_json_store_file_layout():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonBookingStore(data_dir=tmpdir)
        store.create(make_new_booking())

        data = json.loads((Path(tmpdir) / "bookings.json").read_text(encoding="utf-8"))
        assert data["next_id"] == 2
        assert data["bookings"][0]["status"] == "pending"
        assert not (Path(tmpdir) / "bookings.json.tmp").exists()


def test_json_store_damaged_file_is_not_overwritten():
    """A truncated file stops the store instead of handing out id 1 again."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonBookingStore(data_dir=tmpdir)
        store.create(make_new_booking())
        store.create(make_new_booking(start_time="18:00"))

        path = Path(tmpdir) / "bookings.json"
        damaged = path.read_text(encoding="utf-8")[:40]
        path.write_text(damaged, encoding="utf-8")

        reopened = JsonBookingStore(data_dir=tmpdir)
        with pytest.raises(StoreUnavailable):
            reopened.create(make_new_booking(start_time="20:00"))
        with pytest.raises(StoreUnavailable):
            reopened.list_all()
        assert path.read_text(encoding="utf-8") == damaged


def test_json_store_next_id_stays_past_stored_ids():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "bookings.json"
        store = JsonBookingStore(data_dir=tmpdir)
        store.create(make_new_booking())
        store.create(make_new_booking(start_time="18:00"))

        data = json.loads(path.read_text(encoding="utf-8"))
        data["next_id"] = 1
        path.write_text(json.dumps(data), encoding="utf-8")

        assert JsonBookingStore(data_dir=tmpdir).create(make_new_booking()).id == 3
