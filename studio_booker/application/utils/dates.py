from __future__ import annotations

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from studio_booker.application.exceptions import ValidationError


def parse_date(value: str) -> date:
    """Parse an ISO YYYY-MM-DD string."""
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}") from None
    # strptime also takes unpadded fields; stored dates must match byte for byte
    if parsed.strftime("%Y-%m-%d") != value:
        raise ValidationError(f"Invalid date: {value!r}")
    return parsed


def format_date(value: date | str) -> str:
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return parse_date(value).strftime("%Y-%m-%d")


def earliest_bookable_date(timezone: ZoneInfo, lead_days: int, today: date | None = None) -> date:
    if today is None:
        today = datetime.now(timezone).date()
    return today + timedelta(days=lead_days)


def safe_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except Exception:
        return ZoneInfo("UTC")
