from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from studio_booker.application.exceptions import ValidationError
from studio_booker.application.ports.booking_store import BookingStorePort
from studio_booker.domain.entities.booking import Booking, BookingStatus

STATUS_UPDATED_NOTICE = "Booking status updated"

DECISIONS = (BookingStatus.approved, BookingStatus.rejected)

logger = logging.getLogger(__name__)


def parse_decision(requested: BookingStatus | str) -> BookingStatus:
    try:
        target = BookingStatus(requested)
    except ValueError:
        raise ValidationError(f"Invalid status: {requested!r}") from None
    if target not in DECISIONS:
        raise ValidationError(f"Invalid status: {target.value!r}")
    return target


def transition_status(current: BookingStatus, requested: BookingStatus | str) -> BookingStatus:
    """
    Resolve an admin decision against the booking's current status.
    Only approved and rejected can be requested. A decided booking may be
    decided again, the last write wins.
    """
    target = parse_decision(requested)
    if current != BookingStatus.pending and current != target:
        logger.warning(
            "Booking already decided, overwriting",
            extra={"status": f"{current.value}->{target.value}"},
        )
    return target


@dataclass(frozen=True)
class ReviewResult:
    booking: Booking
    notice: str


class ReviewBookingUseCase:
    def __init__(
        self,
        store: BookingStorePort,
        on_change: Iterable[Callable[[], None]] = (),
    ) -> None:
        self._store = store
        self._on_change = list(on_change)
        self._logger = logging.getLogger(__name__)

    def approve(self, booking_id: int) -> ReviewResult:
        return self.set_status(booking_id, BookingStatus.approved)

    def reject(self, booking_id: int) -> ReviewResult:
        return self.set_status(booking_id, BookingStatus.rejected)

    def set_status(self, booking_id: int, requested: BookingStatus | str) -> ReviewResult:
        """Raises ValidationError for a bad status and NotFound for an unknown id."""
        current = self._store.get(booking_id)
        target = transition_status(current.status, requested)
        booking = self._store.update_status(booking_id, target)
        self._logger.info(
            "Booking status updated",
            extra={"booking_id": booking_id, "status": target.value, "date": booking.date},
        )
        for callback in self._on_change:
            callback()
        return ReviewResult(booking=booking, notice=STATUS_UPDATED_NOTICE)
