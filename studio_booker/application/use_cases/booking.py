from __future__ import annotations

import logging
from datetime import date as date_type
from typing import Callable, Iterable, Sequence

from studio_booker.application.exceptions import ValidationError
from studio_booker.application.ports.booking_store import BookingStorePort
from studio_booker.application.utils.dates import format_date, parse_date
from studio_booker.application.utils.phone import PHONE_MAX_LENGTH, PHONE_MIN_LENGTH
from studio_booker.application.utils.slot_grid import is_slot_label
from studio_booker.domain.entities.booking import Booking, NewBooking

SELECT_DATE_MESSAGE = "Please select a date"
SELECT_TIME_MESSAGE = "Please select a time"
WHOLE_HOUR_MESSAGE = "Bookings must be made in whole-hour increments"

MIN_DURATION_HOURS = 1


def booking_validation_message(
    selected_date: date_type | str | None,
    selection: Sequence[str],
) -> str | None:
    """First failing date/selection rule, or None when the pick can be submitted."""
    if not selected_date:
        return SELECT_DATE_MESSAGE
    if len(selection) == 0:
        return SELECT_TIME_MESSAGE
    if len(selection) % 2 != 0:
        return WHOLE_HOUR_MESSAGE
    return None


def validate_new_booking(new_booking: NewBooking, max_duration: int = 10) -> NewBooking:
    if not new_booking.customer_name.strip():
        raise ValidationError("Please enter your name")
    if not new_booking.phone_number:
        raise ValidationError("Please enter your phone number")
    if not PHONE_MIN_LENGTH <= len(new_booking.phone_number) <= PHONE_MAX_LENGTH:
        raise ValidationError(
            f"Phone number must be {PHONE_MIN_LENGTH}-{PHONE_MAX_LENGTH} characters"
        )
    parse_date(new_booking.date)
    if not is_slot_label(new_booking.start_time):
        raise ValidationError(f"Unknown time slot: {new_booking.start_time!r}")
    if not MIN_DURATION_HOURS <= new_booking.duration <= max_duration:
        raise ValidationError(
            f"Duration must be between {MIN_DURATION_HOURS} and {max_duration} hours"
        )
    return new_booking


class BookingUseCase:
    def __init__(
        self,
        store: BookingStorePort,
        max_duration: int = 10,
        on_change: Iterable[Callable[[], None]] = (),
    ) -> None:
        self._store = store
        self._max_duration = max_duration
        self._on_change = list(on_change)
        self._logger = logging.getLogger(__name__)

    def build_request(
        self,
        selected_date: date_type | str | None,
        selection: Sequence[str],
        customer_name: str,
        phone_number: str,
    ) -> NewBooking:
        """
        Turn the booking form into a create request.
        Raises ValidationError with the first rule that fails.
        """
        message = booking_validation_message(selected_date, selection)
        if message:
            raise ValidationError(message)

        new_booking = NewBooking(
            customer_name=customer_name.strip(),
            phone_number=phone_number,
            date=format_date(selected_date),
            start_time=selection[0],
            duration=len(selection) // 2,
        )
        return validate_new_booking(new_booking, self._max_duration)

    def create(self, new_booking: NewBooking) -> Booking:
        validate_new_booking(new_booking, self._max_duration)
        booking = self._store.create(new_booking)
        self._logger.info(
            "Booking requested",
            extra={"booking_id": booking.id, "date": booking.date, "status": booking.status.value},
        )
        for callback in self._on_change:
            callback()
        return booking

    def submit(
        self,
        selected_date: date_type | str | None,
        selection: Sequence[str],
        customer_name: str,
        phone_number: str,
    ) -> Booking:
        return self.create(self.build_request(selected_date, selection, customer_name, phone_number))

    def list_all(self) -> list[Booking]:
        return self._store.list_all()

    def list_by_date(self, date: str) -> list[Booking]:
        return self._store.list_by_date(date)
