from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from studio_booker.application.exceptions import ValidationError
from studio_booker.application.utils.dates import parse_date
from studio_booker.application.utils.phone import PHONE_MAX_LENGTH, PHONE_MIN_LENGTH
from studio_booker.application.utils.slot_grid import is_slot_label
from studio_booker.core.config import settings
from studio_booker.domain.entities.booking import Booking, BookingStatus, NewBooking
from studio_booker.domain.entities.slot import Slot, SlotStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookingCreateSchema(CamelModel):
    customer_name: str = Field(min_length=1)
    phone_number: str = Field(min_length=PHONE_MIN_LENGTH, max_length=PHONE_MAX_LENGTH)
    date: str
    start_time: str
    duration: int = Field(ge=1, le=settings.MAX_DURATION_HOURS)

    @field_validator("customer_name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("customerName must not be blank")
        return v.strip()

    @field_validator("date")
    @classmethod
    def iso_date(cls, v: str) -> str:
        try:
            parse_date(v)
        except ValidationError as e:
            raise ValueError(str(e)) from None
        return v

    @field_validator("start_time")
    @classmethod
    def grid_label(cls, v: str) -> str:
        if not is_slot_label(v):
            raise ValueError("startTime must be a half-hour label HH:00 or HH:30")
        return v

    def to_entity(self) -> NewBooking:
        return NewBooking(
            customer_name=self.customer_name,
            phone_number=self.phone_number,
            date=self.date,
            start_time=self.start_time,
            duration=self.duration,
        )


class BookingSchema(CamelModel):
    id: int
    customer_name: str
    phone_number: str
    date: str
    start_time: str
    duration: int
    status: BookingStatus

    @classmethod
    def from_entity(cls, booking: Booking) -> BookingSchema:
        return cls(
            id=booking.id,
            customer_name=booking.customer_name,
            phone_number=booking.phone_number,
            date=booking.date,
            start_time=booking.start_time,
            duration=booking.duration,
            status=booking.status,
        )


class StatusUpdateSchema(BaseModel):
    status: str | None = None


class SlotSchema(BaseModel):
    time: str
    index: int
    status: SlotStatus

    @classmethod
    def from_entity(cls, slot: Slot) -> SlotSchema:
        return cls(time=slot.time, index=slot.index, status=slot.status)


class AdminSessionRequestSchema(BaseModel):
    password: str = ""


class AdminSessionResponseSchema(BaseModel):
    authenticated: bool


class ErrorSchema(BaseModel):
    error: str
