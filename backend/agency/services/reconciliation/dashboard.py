# backend/agency/services/reconciliation/dashboard.py
"""
Dashboard aggregates over all bookings.

Cancelled bookings are excluded entirely. "Staff Days" is the demand
(needed) count, not fulfillment.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .config import ReconciliationConfig, get_reconciliation_config
from .records import (
    assigned_staff_ids,
    dates_needed,
    get_field,
    parse_number,
    round_half_up,
)
from .staffing import staffing_summary


@dataclass(frozen=True)
class DashboardStats:
    total_active_dates: int = 0
    total_staff_days: int = 0
    total_assigned_slots: int = 0
    total_needed_slots: int = 0
    utilization_percentage: int = 0
    active_bookings: int = 0
    unique_staff_assigned: int = 0
    total_revenue: float = 0.0


def utilization_percentage(assigned: int, needed: int) -> int:
    """round(100 × assigned / max(needed, 1))"""
    return round_half_up(assigned * 100 / max(needed, 1))


def aggregate_dashboard_stats(
    bookings: Iterable[Any] | None,
    config: ReconciliationConfig | None = None,
) -> DashboardStats:
    config = config or get_reconciliation_config()

    active_dates_total = 0
    needed_total = 0
    assigned_total = 0
    active_bookings = 0
    revenue = 0.0
    staff_ids = set()

    for booking in bookings or []:
        if get_field(booking, "status") == config.cancelled_status:
            continue

        summary = staffing_summary(booking)
        active_dates_total += summary.active_date_count
        needed_total += summary.total_staff_days_needed
        assigned_total += summary.total_staff_days_assigned
        active_bookings += 1

        for entry in dates_needed(booking):
            staff_ids.update(assigned_staff_ids(entry))

        amount = get_field(booking, "revenue")
        if isinstance(amount, (int, float)) and not isinstance(amount, bool):
            amount = parse_number(amount)
            if amount is not None:
                revenue += amount

    return DashboardStats(
        total_active_dates=active_dates_total,
        total_staff_days=needed_total,
        total_assigned_slots=assigned_total,
        total_needed_slots=needed_total,
        utilization_percentage=utilization_percentage(assigned_total, needed_total),
        active_bookings=active_bookings,
        unique_staff_assigned=len(staff_ids),
        total_revenue=revenue,
    )
