# backend/agency/services/booking_queries.py
"""
In-memory booking queries over a snapshot.

Mirrors the assistant's search: all given criteria must match (AND).
Status is compared case-insensitively; staff and date criteria match
when any datesNeeded entry matches.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from .reconciliation.records import dates_needed, entry_date, get_field


@dataclass(frozen=True)
class StaffBookingDays:
    booking_id: Any
    show_id: Any
    client_id: Any
    status: Any
    days_worked: int


def _has_staff(booking: Any, staff_id: Any) -> bool:
    for entry in dates_needed(booking):
        ids = get_field(entry, "staffIds")
        if isinstance(ids, (list, tuple)) and staff_id in ids:
            return True
    return False


def _has_date(booking: Any, date: str) -> bool:
    return any(entry_date(e) == date for e in dates_needed(booking))


def search_bookings(
    bookings: Iterable[Any] | None,
    client_id: Optional[str] = None,
    show_id: Optional[str] = None,
    staff_id: Optional[str] = None,
    status: Optional[str] = None,
    date: Optional[str] = None,
) -> list:
    """Filter bookings by the given criteria; no criteria returns all."""
    result = list(bookings or [])

    if client_id:
        result = [b for b in result if get_field(b, "clientId") == client_id]

    if show_id:
        result = [b for b in result if get_field(b, "showId") == show_id]

    if staff_id:
        result = [b for b in result if _has_staff(b, staff_id)]

    if status:
        status_lower = status.lower()
        result = [
            b for b in result
            if isinstance(get_field(b, "status"), str)
            and get_field(b, "status").lower() == status_lower
        ]

    if date:
        result = [b for b in result if _has_date(b, date)]

    return result


def bookings_for_show(bookings: Iterable[Any] | None, show_id: str) -> list:
    return search_bookings(bookings, show_id=show_id) if show_id else []


def staff_booking_history(
    bookings: Iterable[Any] | None,
    staff_id: str,
) -> list[StaffBookingDays]:
    """
    Bookings a staff member is placed on, with days worked per booking.

    days_worked counts date entries listing the staff id (a staff member
    listed twice on the same date still works that date once).
    """
    history = []
    for booking in search_bookings(bookings, staff_id=staff_id):
        days = 0
        for entry in dates_needed(booking):
            ids = get_field(entry, "staffIds")
            if isinstance(ids, (list, tuple)) and staff_id in ids:
                days += 1

        history.append(StaffBookingDays(
            booking_id=get_field(booking, "id"),
            show_id=get_field(booking, "showId"),
            client_id=get_field(booking, "clientId"),
            status=get_field(booking, "status"),
            days_worked=days,
        ))
    return history
