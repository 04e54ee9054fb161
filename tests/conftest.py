"""Shared test fixtures and helpers."""

from __future__ import annotations

from datetime import date
from zoneinfo import ZoneInfo

import pytest

from studio_booker.application.use_cases.admin_overview import AdminOverviewUseCase
from studio_booker.application.use_cases.booking import BookingUseCase
from studio_booker.application.use_cases.booking_form import BookingFormSession
from studio_booker.application.use_cases.review_booking import ReviewBookingUseCase
from studio_booker.application.use_cases.selection import SelectionUseCase
from studio_booker.domain.entities.booking import NewBooking
from studio_booker.infrastructure.store.memory_store import MemoryBookingStore

TODAY = date(2024, 5, 30)


def make_new_booking(
    customer_name: str = "Kim",
    phone_number: str = "010-1234-5678",
    date: str = "2024-06-01",
    start_time: str = "14:00",
    duration: int = 2,
) -> NewBooking:
    return NewBooking(
        customer_name=customer_name,
        phone_number=phone_number,
        date=date,
        start_time=start_time,
        duration=duration,
    )


@pytest.fixture
def store():
    return MemoryBookingStore()


@pytest.fixture
def booking_use_case(store):
    return BookingUseCase(store=store)


@pytest.fixture
def selection_use_case():
    return SelectionUseCase()


@pytest.fixture
def overview(store):
    return AdminOverviewUseCase(store=store)


@pytest.fixture
def review(store, overview):
    return ReviewBookingUseCase(store=store, on_change=[overview.refresh])


@pytest.fixture
def form(booking_use_case, selection_use_case):
    return BookingFormSession(
        booking=booking_use_case,
        selection=selection_use_case,
        timezone=ZoneInfo("Asia/Seoul"),
        lead_days=1,
    )
