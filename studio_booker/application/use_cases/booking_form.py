from __future__ import annotations

import logging
from datetime import date
from zoneinfo import ZoneInfo

from studio_booker.application.exceptions import ContiguitySelectionRejected, ValidationError
from studio_booker.application.use_cases.booking import (
    SELECT_DATE_MESSAGE,
    BookingUseCase,
    booking_validation_message,
)
from studio_booker.application.use_cases.selection import SelectionUseCase
from studio_booker.application.utils.dates import earliest_bookable_date, format_date, parse_date
from studio_booker.application.utils.phone import apply_phone_input
from studio_booker.application.utils.slot_grid import build_grid
from studio_booker.domain.entities.booking import Booking
from studio_booker.domain.entities.notice import Notice
from studio_booker.domain.entities.selection_state import SelectionState
from studio_booker.domain.entities.slot import Slot

SUBMITTED_NOTICE = Notice(
    title="Booking request received",
    description="A confirmation message will be sent once an admin approves it.",
)


class BookingFormSession:
    """
    State of one visitor's booking page: the picked date, the slot selection
    and the name/phone fields. Notices collect the messages the page would
    show as toasts.
    """

    def __init__(
        self,
        booking: BookingUseCase,
        selection: SelectionUseCase,
        timezone: ZoneInfo,
        lead_days: int = 1,
    ) -> None:
        self._booking = booking
        self._selection_use_case = selection
        self._timezone = timezone
        self._lead_days = lead_days
        self._logger = logging.getLogger(__name__)

        self.selected_date: date | None = None
        self.selection = SelectionState()
        self.customer_name = ""
        self.phone_number = ""
        self.notices: list[Notice] = []

    @property
    def date_text(self) -> str | None:
        return format_date(self.selected_date) if self.selected_date else None

    def select_date(self, day: date | str, today: date | None = None) -> None:
        if isinstance(day, str):
            day = parse_date(day)
        earliest = earliest_bookable_date(self._timezone, self._lead_days, today)
        if day < earliest:
            raise ValidationError(f"Bookings open from {format_date(earliest)}")
        self.selected_date = day
        self.selection = self._selection_use_case.reset()

    def day_bookings(self) -> list[Booking]:
        if self.selected_date is None:
            return []
        return self._booking.list_by_date(self.date_text)

    def grid(self) -> list[Slot]:
        if self.selected_date is None:
            return []
        return build_grid(self.date_text, self.day_bookings())

    def toggle(self, label: str) -> SelectionState:
        if self.selected_date is None:
            self.notices.append(Notice(title=SELECT_DATE_MESSAGE, variant="destructive"))
            return self.selection
        try:
            self.selection = self._selection_use_case.toggle(
                self.selection, label, self.day_bookings(), self.date_text
            )
        except ContiguitySelectionRejected as e:
            self.notices.append(Notice(title=str(e), variant="destructive"))
        return self.selection

    def enter_name(self, value: str) -> None:
        self.customer_name = value

    def enter_phone(self, raw: str) -> str:
        self.phone_number = apply_phone_input(self.phone_number, raw)
        return self.phone_number

    def validation_message(self) -> str | None:
        return booking_validation_message(self.selected_date, self.selection.labels)

    def submit(self) -> Booking | None:
        """Create the booking; on a rule failure add a notice and return None."""
        try:
            booking = self._booking.submit(
                self.selected_date,
                self.selection.labels,
                self.customer_name,
                self.phone_number,
            )
        except ValidationError as e:
            self.notices.append(Notice(title=str(e), variant="destructive"))
            return None

        self.notices.append(SUBMITTED_NOTICE)
        self.reset_form()
        return booking

    def reset_form(self) -> None:
        self.customer_name = ""
        self.phone_number = ""
        self.selection = self._selection_use_case.reset()
