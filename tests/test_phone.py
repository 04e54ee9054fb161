"""
Tests for phone number formatting.
"""

from studio_booker.application.utils.phone import (
    apply_phone_input,
    display_phone_number,
    format_phone_number,
)


def test_progressive_formatting():
    digits = "01012345678"
    assert format_phone_number(digits[:3]) == "010"
    assert format_phone_number(digits[:7]) == "010-1234"
    assert format_phone_number(digits) == "010-1234-5678"


def test_formatting_strips_non_digits():
    assert format_phone_number("010 12-34a") == "010-1234"
    assert format_phone_number("") == ""


def test_digits_beyond_eleven_are_dropped():
    assert format_phone_number("010123456789999") == "010-1234-5678"


def test_apply_phone_input_typing_sequence():
    value = ""
    for typed in ("0", "01", "010", "0101", "010-12345", "010-1234-5678"):
        value = apply_phone_input(value, typed)
    assert value == "010-1234-5678"


def test_display_phone_number():
    assert display_phone_number("01012345678") == "010-1234-5678"
    assert display_phone_number("010-123-4567") == "010-123-4567"
