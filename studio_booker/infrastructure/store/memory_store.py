from __future__ import annotations

import logging

from studio_booker.application.exceptions import NotFound
from studio_booker.application.ports.booking_store import BookingStorePort
from studio_booker.domain.entities.booking import Booking, BookingStatus, NewBooking


class MemoryBookingStore(BookingStorePort):
    def __init__(self) -> None:
        self._bookings: dict[int, Booking] = {}
        self._next_id = 1
        self._logger = logging.getLogger(__name__)

    def create(self, new_booking: NewBooking) -> Booking:
        booking_id = self._next_id
        self._next_id += 1
        booking = Booking.from_new(booking_id, new_booking)
        self._bookings[booking_id] = booking
        self._logger.info("Booking stored", extra={"booking_id": booking_id, "date": booking.date})
        return booking

    def list_all(self) -> list[Booking]:
        return list(self._bookings.values())

    def list_by_date(self, date: str) -> list[Booking]:
        return [booking for booking in self._bookings.values() if booking.date == date]

    def get(self, booking_id: int) -> Booking:
        booking = self._bookings.get(booking_id)
        if booking is None:
            raise NotFound(booking_id)
        return booking

    def update_status(self, booking_id: int, status: BookingStatus) -> Booking:
        booking = self.get(booking_id)
        updated = booking.with_status(status)
        self._bookings[booking_id] = updated
        return updated
