#!/usr/bin/env python3
"""
Interactive local booking harness (no HTTP).

Usage:
  python3 scripts/book_local.py

What it does:
- Drives one booking form session against the configured store
- Prints the slot grid for the picked date and the current selection
- Lets you approve or reject bookings as the admin would
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from studio_booker.application.exceptions import BookingError
from studio_booker.application.utils.phone import display_phone_number
from studio_booker.domain.entities.slot import SlotStatus
from studio_booker.wiring.dependencies import (
    get_admin_overview_use_case,
    get_review_booking_use_case,
    new_booking_form,
)

GRID_MARKS = {
    SlotStatus.free: " ",
    SlotStatus.pending: "?",
    SlotStatus.approved: "#",
}


def _print_header() -> None:
    print("\nLocal Booking Harness")
    print("-" * 60)
    print("Commands:")
    print("  /date YYYY-MM-DD   pick a date")
    print("  /slot HH:MM        toggle a half-hour slot")
    print("  /name TEXT         set the customer name")
    print("  /phone DIGITS      set the phone number")
    print("  /submit            send the booking request")
    print("  /pending           list pending bookings")
    print("  /approve ID, /reject ID")
    print("  /quit")
    print("-" * 60)


def _print_grid(form) -> None:
    grid = form.grid()
    if not grid:
        print("(pick a date first)")
        return
    for row_start in range(0, len(grid), 6):
        cells = []
        for slot in grid[row_start : row_start + 6]:
            mark = "*" if slot.time in form.selection else GRID_MARKS[slot.status]
            cells.append(f"[{mark}]{slot.time}")
        print("  ".join(cells))
    print("legend: * selected, ? pending, # approved")


def _flush_notices(form) -> None:
    for notice in form.notices:
        prefix = "!" if notice.variant == "destructive" else "i"
        line = f"({prefix}) {notice.title}"
        if notice.description:
            line += f" - {notice.description}"
        print(line)
    form.notices.clear()


def main() -> None:
    form = new_booking_form()
    overview = get_admin_overview_use_case()
    review = get_review_booking_use_case()
    _print_header()

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd, _, arg = user_text.partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()

        try:
            if cmd in ("/quit", "/exit"):
                print("Bye!")
                return
            if cmd == "/help":
                _print_header()
            elif cmd == "/date":
                form.select_date(arg)
                _print_grid(form)
            elif cmd == "/slot":
                form.toggle(arg)
                _print_grid(form)
                print(f"selection: {', '.join(form.selection.labels) or '(none)'}")
            elif cmd == "/name":
                form.enter_name(arg)
            elif cmd == "/phone":
                print(f"phone: {form.enter_phone(arg)}")
            elif cmd == "/submit":
                booking = form.submit()
                if booking is not None:
                    print(f"booking #{booking.id} {booking.date} {booking.start_time} ({booking.duration}h)")
            elif cmd == "/pending":
                pending = overview.pending()
                if not pending:
                    print("(no pending bookings)")
                for b in pending:
                    print(
                        f"#{b.id} {b.customer_name} {display_phone_number(b.phone_number)} "
                        f"{b.date} {b.start_time} ({b.duration}h)"
                    )
            elif cmd in ("/approve", "/reject"):
                booking_id = int(arg)
                result = review.approve(booking_id) if cmd == "/approve" else review.reject(booking_id)
                print(f"{result.notice}: #{result.booking.id} -> {result.booking.status.value}")
            else:
                print("Unknown command, try /help")
        except (BookingError, ValueError) as e:
            print(f"ERROR: {e}")

        message = form.validation_message()
        if message and cmd in ("/date", "/slot"):
            print(f"note: {message}")
        _flush_notices(form)


if __name__ == "__main__":
    main()
