from __future__ import annotations

import threading

from studio_booker.application.ports.booking_store import BookingStorePort
from studio_booker.application.utils.dates import format_date
from studio_booker.domain.entities.booking import Booking, BookingStatus


class AdminOverviewUseCase:
    """Booking lists for the admin page, cached until the next booking change."""

    def __init__(self, store: BookingStorePort) -> None:
        self._store = store
        self._cache: list[Booking] | None = None
        self._version = 0
        self._lock = threading.Lock()

    def bookings(self) -> list[Booking]:
        with self._lock:
            if self._cache is not None:
                return list(self._cache)
            version = self._version

        bookings = self._store.list_all()

        with self._lock:
            # a refresh() while reading means this list may already be stale
            if self._version == version:
                self._cache = bookings
        return list(bookings)

    def refresh(self) -> None:
        with self._lock:
            self._cache = None
            self._version += 1

    def pending(self) -> list[Booking]:
        return [booking for booking in self.bookings() if booking.status == BookingStatus.pending]

    def for_date(self, date: str | None = None) -> list[Booking]:
        if not date:
            return self.bookings()
        day = format_date(date)
        return [booking for booking in self.bookings() if booking.date == day]
