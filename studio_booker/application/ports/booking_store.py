from abc import ABC, abstractmethod

from studio_booker.domain.entities.booking import Booking, BookingStatus, NewBooking


class BookingStorePort(ABC):
    @abstractmethod
    def create(self, new_booking: NewBooking) -> Booking:
        """Assign the next id, store the booking as pending and return it."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_by_date(self, date: str) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: int) -> Booking:
        """Raises NotFound if the id is unknown."""
        raise NotImplementedError

    @abstractmethod
    def update_status(self, booking_id: int, status: BookingStatus) -> Booking:
        """
        Replace the stored booking's status and return the updated copy.
        Raises NotFound if the id is unknown; the store is left untouched.
        """
        raise NotImplementedError
