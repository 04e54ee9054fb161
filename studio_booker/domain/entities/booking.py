from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class BookingStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


@dataclass(frozen=True)
class NewBooking:
    customer_name: str
    phone_number: str
    date: str  # YYYY-MM-DD
    start_time: str  # HH:MM, one of the 48 half-hour labels
    duration: int  # hours


@dataclass(frozen=True)
class Booking:
    id: int
    customer_name: str
    phone_number: str
    date: str
    start_time: str
    duration: int
    status: BookingStatus = BookingStatus.pending

    @classmethod
    def from_new(cls, booking_id: int, new_booking: NewBooking) -> Booking:
        return cls(
            id=booking_id,
            customer_name=new_booking.customer_name,
            phone_number=new_booking.phone_number,
            date=new_booking.date,
            start_time=new_booking.start_time,
            duration=new_booking.duration,
            status=BookingStatus.pending,
        )

    def with_status(self, status: BookingStatus) -> Booking:
        return replace(self, status=status)

    @property
    def slot_count(self) -> int:
        return self.duration * 2
