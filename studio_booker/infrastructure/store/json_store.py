from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from studio_booker.application.exceptions import NotFound, StoreUnavailable
from studio_booker.application.ports.booking_store import BookingStorePort
from studio_booker.domain.entities.booking import Booking, BookingStatus, NewBooking


class JsonBookingStore(BookingStorePort):
    """Keeps every booking in one JSON file so records survive a restart."""

    def __init__(self, data_dir: str = "./data", filename: str = "bookings.json") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / filename
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def _empty_data(self) -> dict[str, Any]:
        return {"next_id": 1, "bookings": [], "version": 1}

    def _load_data(self) -> dict[str, Any]:
        """
        Load store data from the JSON file, return defaults if missing.
        An unreadable file raises StoreUnavailable and is never overwritten.
        """
        if not self._file_path.exists():
            return self._empty_data()

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            self._logger.error("Booking file unreadable", extra={"reason": str(e)})
            raise StoreUnavailable(f"Cannot read {self._file_path}: {e}") from e

        data.setdefault("version", 1)
        data.setdefault("bookings", [])
        highest = max((item["id"] for item in data["bookings"]), default=0)
        data["next_id"] = max(data.get("next_id", 1), highest + 1)
        return data

    def _save_data(self, data: dict[str, Any]) -> None:
        """Save store data atomically."""
        temp_path = self._file_path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    def _serialize_booking(self, booking: Booking) -> dict[str, Any]:
        return {
            "id": booking.id,
            "customer_name": booking.customer_name,
            "phone_number": booking.phone_number,
            "date": booking.date,
            "start_time": booking.start_time,
            "duration": booking.duration,
            "status": booking.status.value,
        }

    def _deserialize_booking(self, data: dict[str, Any]) -> Booking:
        return Booking(
            id=int(data["id"]),
            customer_name=data["customer_name"],
            phone_number=data["phone_number"],
            date=data["date"],
            start_time=data["start_time"],
            duration=int(data["duration"]),
            status=BookingStatus(data.get("status", BookingStatus.pending.value)),
        )

    def create(self, new_booking: NewBooking) -> Booking:
        with self._lock:
            data = self._load_data()
            booking = Booking.from_new(data["next_id"], new_booking)
            data["next_id"] = booking.id + 1
            data["bookings"].append(self._serialize_booking(booking))
            self._save_data(data)
        self._logger.info("Booking stored", extra={"booking_id": booking.id, "date": booking.date})
        return booking

    def list_all(self) -> list[Booking]:
        with self._lock:
            data = self._load_data()
        return [self._deserialize_booking(item) for item in data["bookings"]]

    def list_by_date(self, date: str) -> list[Booking]:
        return [booking for booking in self.list_all() if booking.date == date]

    def get(self, booking_id: int) -> Booking:
        for booking in self.list_all():
            if booking.id == booking_id:
                return booking
        raise NotFound(booking_id)

    def update_status(self, booking_id: int, status: BookingStatus) -> Booking:
        with self._lock:
            data = self._load_data()
            for position, item in enumerate(data["bookings"]):
                if item["id"] == booking_id:
                    updated = self._deserialize_booking(item).with_status(status)
                    data["bookings"][position] = self._serialize_booking(updated)
                    self._save_data(data)
                    return updated
        raise NotFound(booking_id)
