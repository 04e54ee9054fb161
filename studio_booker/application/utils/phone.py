from __future__ import annotations

import re

PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 13  # XXX-XXXX-XXXX

_NON_DIGITS = re.compile(r"[^\d]")


def format_phone_number(value: str) -> str:
    """Strip non-digits and regroup as XXX, XXX-XXXX or XXX-XXXX-XXXX."""
    numbers = _NON_DIGITS.sub("", value)
    if len(numbers) <= 3:
        return numbers
    if len(numbers) <= 7:
        return f"{numbers[:3]}-{numbers[3:]}"
    return f"{numbers[:3]}-{numbers[3:7]}-{numbers[7:11]}"


def apply_phone_input(current: str, raw: str) -> str:
    """Format typed input; input that would not fit in the field keeps `current`."""
    formatted = format_phone_number(raw)
    if len(formatted) > PHONE_MAX_LENGTH:
        return current
    return formatted


def display_phone_number(phone_number: str) -> str:
    cleaned = _NON_DIGITS.sub("", phone_number)
    if len(cleaned) == 11:
        return f"{cleaned[:3]}-{cleaned[3:7]}-{cleaned[7:]}"
    return phone_number
