# backend/agency/services/reconciliation/staffing.py
"""
Booking staffing reconciliation.

A booking needs staff on a set of dates (datesNeeded). Each entry carries
staffCount (slots needed) and staffIds (slots filled, may hold empty
placeholders). Entries with staffCount == 0 are not active staffing dates
and are excluded from every "dates" and "needed" count.

Note the asymmetry kept from the dashboard:
  needed   = sum over ACTIVE entries of staffCount
  assigned = sum over ALL entries of truthy staffIds
so utilization can exceed 100% when staff sit on inactive dates.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .records import (
    assigned_staff_ids,
    dates_needed,
    entry_date,
    round_half_up,
    staff_count,
)

logger = logging.getLogger(__name__)

FILLED = "filled"
UNFILLED = "unfilled"


@dataclass(frozen=True)
class BookingStaffingSummary:
    active_date_count: int
    total_staff_days_needed: int
    total_staff_days_assigned: int
    staffing_status: str
    unfilled_by_date: dict[str, int] = field(default_factory=dict)
    completion_percentage: int = 0


@dataclass(frozen=True)
class DateRange:
    first_date: str
    last_date: str


def active_dates(booking: Any) -> list:
    """
    Entries of datesNeeded with staffCount > 0, in input order.

    Sorting is left to callers (see date_range_summary).
    """
    if isinstance(booking, Mapping) and "datesNeeded" in booking:
        raw = booking["datesNeeded"]
        if raw is not None and not isinstance(raw, (list, tuple)):
            logger.debug(
                f"Booking {booking.get('id')}: datesNeeded is "
                f"{type(raw).__name__}, treating as empty"
            )
    return [d for d in dates_needed(booking) if staff_count(d) > 0]


def staffing_summary(booking: Any) -> BookingStaffingSummary:
    """
    Compute staffing totals and fill status for a booking.

    A booking with nothing needed is "unfilled", never trivially "filled".
    """
    active = active_dates(booking)

    needed = sum(staff_count(d) for d in active)
    assigned = sum(len(assigned_staff_ids(d)) for d in dates_needed(booking))

    unfilled: dict[str, int] = {}
    for entry in active:
        shortfall = max(0, staff_count(entry) - len(assigned_staff_ids(entry)))
        if shortfall <= 0:
            continue
        key = entry_date(entry) or ""
        unfilled[key] = unfilled.get(key, 0) + shortfall

    if needed > 0 and assigned >= needed:
        status = FILLED
    else:
        status = UNFILLED

    completion = round_half_up(assigned * 100 / needed) if needed > 0 else 0

    return BookingStaffingSummary(
        active_date_count=len(active),
        total_staff_days_needed=needed,
        total_staff_days_assigned=assigned,
        staffing_status=status,
        unfilled_by_date=unfilled,
        completion_percentage=completion,
    )


def date_range_summary(booking: Any) -> DateRange | None:
    """
    First and last active date (YYYY-MM-DD sorts lexicographically).

    Returns None when there are no dated active entries.
    """
    dates = sorted(
        d for d in (entry_date(e) for e in active_dates(booking)) if d
    )
    if not dates:
        return None
    return DateRange(first_date=dates[0], last_date=dates[-1])
