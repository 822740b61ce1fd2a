# backend/agency/services/reconciliation/payroll.py
"""
Show payroll.

Counts literal assigned staff-day occurrences across every booking of a show:
each truthy staffId on each datesNeeded entry is one day worked, regardless
of the entry's nominal staffCount.

    total_owed = days_worked × hours_per_day × rate
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

from .config import get_reconciliation_config
from .records import assigned_staff_ids, dates_needed, get_field, parse_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollEntry:
    staff_id: Any
    name: str
    rate: float
    days_worked: int
    total_owed: float


@dataclass(frozen=True)
class ShowPayroll:
    hours_per_day: float
    entries: list[PayrollEntry] = field(default_factory=list)
    grand_total: float = 0.0
    show_id: Optional[str] = None


def staff_display_name(staff: Any) -> str:
    """name, else "firstName lastName", else the staff id."""
    name = get_field(staff, "name")
    if isinstance(name, str) and name.strip():
        return name.strip()

    parts = [
        get_field(staff, "firstName"),
        get_field(staff, "lastName"),
    ]
    composed = " ".join(p.strip() for p in parts if isinstance(p, str) and p.strip())
    if composed:
        return composed

    staff_id = get_field(staff, "id")
    return str(staff_id) if staff_id is not None else ""


def parse_rate(value: Any) -> float:
    """Hourly rate from payRate; missing or non-numeric → 0."""
    rate = parse_number(value)
    return rate if rate is not None else 0.0


def _roster_index(staff_roster: Iterable[Any] | None) -> dict:
    index = {}
    for member in staff_roster or []:
        staff_id = get_field(member, "id")
        if staff_id is None:
            continue
        try:
            index[staff_id] = member
        except TypeError:
            index[str(staff_id)] = member
    return index


def compute_payroll(
    bookings_for_show: Iterable[Any] | None,
    staff_roster: Iterable[Any] | None,
    hours_per_day: float | None = None,
    show_id: Optional[str] = None,
) -> ShowPayroll:
    """
    Build per-staff payroll for a show's bookings.

    Args:
        bookings_for_show: bookings already scoped to one show
        staff_roster: staff documents used for names and payRate
        hours_per_day: billable hours per day (defaults to config)
        show_id: echoed back on the result

    Returns:
        ShowPayroll with entries sorted by display name (case-insensitive).
        Staff never assigned are omitted; assigned staff missing from the
        roster are listed under their id with rate 0.
    """
    if hours_per_day is None:
        hours_per_day = get_reconciliation_config().hours_per_day

    # every listing counts, repeats on one date included (staff history counts dates)
    days: dict[Any, int] = {}
    for booking in bookings_for_show or []:
        for entry in dates_needed(booking):
            for staff_id in assigned_staff_ids(entry):
                days[staff_id] = days.get(staff_id, 0) + 1

    roster = _roster_index(staff_roster)
    entries = []
    for staff_id, days_worked in days.items():
        member = roster.get(staff_id)
        if member is None:
            logger.debug(f"Payroll: staff {staff_id} not in roster, rate 0")
            name = str(staff_id)
            rate = 0.0
        else:
            name = staff_display_name(member) or str(staff_id)
            rate = parse_rate(get_field(member, "payRate"))

        entries.append(PayrollEntry(
            staff_id=staff_id,
            name=name,
            rate=rate,
            days_worked=days_worked,
            total_owed=days_worked * hours_per_day * rate,
        ))

    entries.sort(key=lambda e: (e.name.lower(), str(e.staff_id)))
    grand_total = sum(e.total_owed for e in entries)

    logger.info(
        f"Payroll computed for show {show_id}: "
        f"{len(entries)} staff, total {grand_total:.2f}"
    )

    return ShowPayroll(
        hours_per_day=hours_per_day,
        entries=entries,
        grand_total=grand_total,
        show_id=show_id,
    )
