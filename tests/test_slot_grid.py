"""
Tests for the half-hour slot grid and slot occupancy.
"""

from __future__ import annotations

import pytest

from studio_booker.application.exceptions import ValidationError
from studio_booker.application.utils.slot_grid import (
    build_grid,
    slot_index,
    slot_label,
    slot_status,
    time_slots,
)
from studio_booker.domain.entities.booking import BookingStatus
from studio_booker.domain.entities.slot import SlotStatus

from conftest import make_new_booking


def test_day_has_48_half_hour_labels():
    slots = time_slots()
    assert len(slots) == 48
    assert slots[:3] == ["00:00", "00:30", "01:00"]
    assert slots[-1] == "23:30"
    assert slot_label(27) == "13:30"


def test_slot_index_round_trips_labels():
    assert slot_index("00:00") == 0
    assert slot_index("14:00") == 28
    assert slot_index("23:30") == 47


def test_slot_index_rejects_unknown_label():
    with pytest.raises(ValidationError):
        slot_index("14:15")


def test_booking_occupies_duration_times_two_slots(store):
    """A 2-hour booking at 14:00 covers 14:00-15:30 and nothing around it."""
    store.create(make_new_booking(start_time="14:00", duration=2))
    bookings = store.list_by_date("2024-06-01")

    assert slot_status("14:00", bookings) == SlotStatus.pending
    assert slot_status("14:30", bookings) == SlotStatus.pending
    assert slot_status("15:30", bookings) == SlotStatus.pending
    assert slot_status("13:30", bookings) == SlotStatus.free
    assert slot_status("16:00", bookings) == SlotStatus.free


def test_one_hour_booking_scenario(store):
    store.create(make_new_booking(start_time="14:00", duration=1))
    bookings = store.list_by_date("2024-06-01")

    assert slot_status("14:00", bookings) == SlotStatus.pending
    assert slot_status("14:30", bookings) == SlotStatus.pending
    assert slot_status("13:30", bookings) == SlotStatus.free
    assert slot_status("15:00", bookings) == SlotStatus.free


def test_approved_booking_shows_approved(store):
    booking = store.create(make_new_booking(start_time="10:00", duration=1))
    store.update_status(booking.id, BookingStatus.approved)

    assert slot_status("10:30", store.list_all()) == SlotStatus.approved


def test_rejected_booking_frees_its_slots(store):
    booking = store.create(make_new_booking(start_time="10:00", duration=1))
    store.update_status(booking.id, BookingStatus.rejected)

    assert slot_status("10:00", store.list_all()) == SlotStatus.free


def test_other_dates_are_ignored_when_date_given(store):
    store.create(make_new_booking(date="2024-06-02", start_time="10:00"))

    assert slot_status("10:00", store.list_all(), "2024-06-01") == SlotStatus.free
    assert slot_status("10:00", store.list_all(), "2024-06-02") == SlotStatus.pending


def test_build_grid(store):
    store.create(make_new_booking(start_time="23:00", duration=1))
    store.create(make_new_booking(date="2024-06-02", start_time="00:00", duration=1))

    grid = build_grid("2024-06-01", store.list_all())

    assert len(grid) == 48
    assert [s.time for s in grid if not s.is_free] == ["23:00", "23:30"]
    assert grid[46].index == 46
