import logging

from fastapi import FastAPI

from studio_booker.api.v1.admin import router as admin_router
from studio_booker.api.v1.bookings import router as bookings_router
from studio_booker.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("booking_id", "date", "status", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=f"{settings.STUDIO_NAME} Booking", version="1.0.0")

app.include_router(bookings_router, prefix=settings.API_PREFIX, tags=["bookings"])
app.include_router(admin_router, prefix=settings.API_PREFIX, tags=["admin"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
