#!/usr/bin/env python3
"""Smoke script for the booking API against a running server."""

import sys
from datetime import date, timedelta

import httpx


BASE_URL = "http://127.0.0.1:8001"


def smoke_create() -> int | None:
    """Create one booking for tomorrow at 14:00."""
    print("=" * 60)
    print("POST /api/bookings")
    print("=" * 60)

    payload = {
        "customerName": "Kim",
        "phoneNumber": "010-1234-5678",
        "date": (date.today() + timedelta(days=1)).isoformat(),
        "startTime": "14:00",
        "duration": 2,
    }

    try:
        response = httpx.post(f"{BASE_URL}/api/bookings", json=payload, timeout=10.0)
        response.raise_for_status()
        data = response.json()
        print(f"Created booking #{data['id']} status={data['status']}")
        return data["id"]
    except httpx.HTTPStatusError as e:
        print(f"HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None


def smoke_slots(day: str) -> None:
    print("\n" + "=" * 60)
    print(f"GET /api/bookings/{day}/slots")
    print("=" * 60)

    response = httpx.get(f"{BASE_URL}/api/bookings/{day}/slots", timeout=10.0)
    response.raise_for_status()
    taken = [s["time"] for s in response.json() if s["status"] != "free"]
    print(f"Occupied slots: {', '.join(taken) or '(none)'}")


def smoke_approve(booking_id: int) -> None:
    print("\n" + "=" * 60)
    print(f"PATCH /api/bookings/{booking_id}/status")
    print("=" * 60)

    response = httpx.patch(
        f"{BASE_URL}/api/bookings/{booking_id}/status",
        json={"status": "approved"},
        timeout=10.0,
    )
    response.raise_for_status()
    print(f"Booking #{booking_id} -> {response.json()['status']}")


def main():
    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
        print("Server is running\n")
    except Exception:
        print("Server is not running!")
        print("   Please start it with: uvicorn studio_booker.main:app --reload --port 8001")
        sys.exit(1)

    booking_id = smoke_create()
    if booking_id is None:
        sys.exit(1)
    smoke_slots((date.today() + timedelta(days=1)).isoformat())
    smoke_approve(booking_id)

    print("\n" + "=" * 60)
    print("Smoke run complete")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
