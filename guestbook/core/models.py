# guestbook/core/models.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class BookingEntry:
    """A single guestbook entry: who stays and from when to when.

    Equality is by value over all three fields, so two entries typed in with
    the same name and dates are indistinguishable.
    """

    name: str
    arrival_date: date
    departure_date: date


class BookingValidationError(ValueError):
    """Form input that must not reach the store (blank name, missing dates).

    The message is user facing and shown as-is by the UI.
    """
