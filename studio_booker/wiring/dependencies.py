from functools import lru_cache
import logging

from studio_booker.application.ports.booking_store import BookingStorePort
from studio_booker.application.use_cases.admin_overview import AdminOverviewUseCase
from studio_booker.application.use_cases.booking import BookingUseCase
from studio_booker.application.use_cases.booking_form import BookingFormSession
from studio_booker.application.use_cases.review_booking import ReviewBookingUseCase
from studio_booker.application.use_cases.selection import SelectionUseCase
from studio_booker.application.utils.dates import safe_timezone
from studio_booker.core.config import settings
from studio_booker.infrastructure.store.json_store import JsonBookingStore
from studio_booker.infrastructure.store.memory_store import MemoryBookingStore


_booking_store: BookingStorePort | None = None


def get_booking_store() -> BookingStorePort:
    global _booking_store
    if _booking_store is None:
        provider = settings.STORE_PROVIDER.lower()
        if provider == "json":
            _booking_store = JsonBookingStore(data_dir=settings.DATA_DIR)
        elif provider == "memory":
            _booking_store = MemoryBookingStore()
        else:
            raise ValueError(f"Unknown STORE_PROVIDER: {settings.STORE_PROVIDER}")
        logging.getLogger(__name__).info("Using %s booking store", provider)
    return _booking_store


def reset_booking_store() -> None:
    global _booking_store
    _booking_store = None
    get_booking_use_case.cache_clear()
    get_admin_overview_use_case.cache_clear()
    get_review_booking_use_case.cache_clear()


@lru_cache
def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        store=get_booking_store(),
        max_duration=settings.MAX_DURATION_HOURS,
        on_change=[get_admin_overview_use_case().refresh],
    )


@lru_cache
def get_admin_overview_use_case() -> AdminOverviewUseCase:
    return AdminOverviewUseCase(store=get_booking_store())


@lru_cache
def get_review_booking_use_case() -> ReviewBookingUseCase:
    overview = get_admin_overview_use_case()
    return ReviewBookingUseCase(store=get_booking_store(), on_change=[overview.refresh])


def new_booking_form() -> BookingFormSession:
    return BookingFormSession(
        booking=get_booking_use_case(),
        selection=SelectionUseCase(),
        timezone=safe_timezone(settings.STUDIO_TIMEZONE),
        lead_days=settings.BOOKING_LEAD_DAYS,
    )
