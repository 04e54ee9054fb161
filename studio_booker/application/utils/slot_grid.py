from __future__ import annotations

from typing import Iterable

from studio_booker.application.exceptions import ValidationError
from studio_booker.domain.entities.booking import Booking, BookingStatus
from studio_booker.domain.entities.slot import Slot, SlotStatus

SLOTS_PER_DAY = 48

OCCUPYING_STATUSES = {
    BookingStatus.pending: SlotStatus.pending,
    BookingStatus.approved: SlotStatus.approved,
}


def slot_label(index: int) -> str:
    """Label for grid index 0-47: even indices on the hour, odd ones at half past."""
    hour = index // 2
    minute = "00" if index % 2 == 0 else "30"
    return f"{hour:02d}:{minute}"


TIME_SLOTS: tuple[str, ...] = tuple(slot_label(i) for i in range(SLOTS_PER_DAY))
_INDEX_BY_LABEL = {label: i for i, label in enumerate(TIME_SLOTS)}


def time_slots() -> list[str]:
    return list(TIME_SLOTS)


def is_slot_label(label: str) -> bool:
    return label in _INDEX_BY_LABEL


def slot_index(label: str) -> int:
    try:
        return _INDEX_BY_LABEL[label]
    except KeyError:
        raise ValidationError(f"Unknown time slot: {label!r}") from None


def covers(booking: Booking, index: int) -> bool:
    """True when the booking's half-hour run includes grid index `index`."""
    start = _INDEX_BY_LABEL.get(booking.start_time)
    if start is None:
        return False
    return start <= index < start + booking.slot_count


def slot_status(label: str, bookings: Iterable[Booking], date: str | None = None) -> SlotStatus:
    """
    Occupancy of one slot. The first pending or approved booking covering the
    label wins; rejected bookings free their slots again.
    """
    index = slot_index(label)
    for booking in bookings:
        if date is not None and booking.date != date:
            continue
        occupancy = OCCUPYING_STATUSES.get(booking.status)
        if occupancy is None:
            continue
        if covers(booking, index):
            return occupancy
    return SlotStatus.free


def build_grid(date: str, bookings: Iterable[Booking]) -> list[Slot]:
    day_bookings = [booking for booking in bookings if booking.date == date]
    return [
        Slot(time=label, index=i, status=slot_status(label, day_bookings))
        for i, label in enumerate(TIME_SLOTS)
    ]
