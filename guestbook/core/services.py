# guestbook/core/services.py
# Place for validation & formatting rules. Keep GUI thin: call these functions.
from __future__ import annotations

from datetime import date
from typing import Optional

from .models import BookingEntry, BookingValidationError

DEFAULT_DATE_FORMAT = "%d.%m.%Y"

MSG_MISSING_NAME = "Bitte gib deinen Namen ein."
MSG_MISSING_DATES = "Bitte wähle einen Datum aus."


def format_date(d: date, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    return d.strftime(date_format)


def format_date_range(arrival_date: date, departure_date: date,
                      date_format: str = DEFAULT_DATE_FORMAT) -> str:
    # Human-friendly range used by the list rows and the form field
    return f"{format_date(arrival_date, date_format)} - {format_date(departure_date, date_format)}"


def validate_booking_input(name: str, arrival_date: Optional[date],
                           departure_date: Optional[date]) -> None:
    """
    Reject input that must not reach the store.
    Only emptiness is checked: no ordering or overlap rules.
    """
    if not name or not name.strip():
        raise BookingValidationError(MSG_MISSING_NAME)
    if arrival_date is None or departure_date is None:
        raise BookingValidationError(MSG_MISSING_DATES)


def create_booking_entry(name: str, arrival_date: Optional[date],
                         departure_date: Optional[date]) -> BookingEntry:
    validate_booking_input(name, arrival_date, departure_date)
    # name is kept as typed
    return BookingEntry(name=name, arrival_date=arrival_date, departure_date=departure_date)
