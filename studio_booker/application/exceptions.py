class BookingError(RuntimeError):
    """Base class for booking failures surfaced to the caller."""
    pass


class ValidationError(BookingError):
    """Raised when a booking submission or status value is malformed or out of range."""
    pass


class NotFound(BookingError):
    """Raised when a booking id is unknown to the store."""

    def __init__(self, booking_id: int) -> None:
        super().__init__(f"Booking not found: {booking_id}")
        self.booking_id = booking_id


class ContiguitySelectionRejected(BookingError):
    """Raised when a slot is picked that does not extend the selection at its tail."""

    def __init__(self, label: str, last_label: str) -> None:
        super().__init__("Only contiguous time slots can be selected")
        self.label = label
        self.last_label = last_label


class StoreUnavailable(BookingError):
    """Raised when stored bookings cannot be read back."""
    pass
