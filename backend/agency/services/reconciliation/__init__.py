# backend/agency/services/reconciliation/__init__.py
"""
Booking reconciliation module.

Single source of truth for staffing fill state, payment status,
payroll and dashboard totals. Pure functions over booking snapshots:
no I/O, no caching, recompute on every new snapshot.
"""

from .config import ReconciliationConfig, get_reconciliation_config
from .staffing import (
    BookingStaffingSummary,
    DateRange,
    active_dates,
    date_range_summary,
    staffing_summary,
)
from .payment import payment_label, payment_summary
from .payroll import (
    PayrollEntry,
    ShowPayroll,
    compute_payroll,
    parse_rate,
    staff_display_name,
)
from .dashboard import DashboardStats, aggregate_dashboard_stats

__all__ = [
    "ReconciliationConfig",
    "get_reconciliation_config",
    "BookingStaffingSummary",
    "DateRange",
    "active_dates",
    "staffing_summary",
    "date_range_summary",
    "payment_summary",
    "payment_label",
    "PayrollEntry",
    "ShowPayroll",
    "compute_payroll",
    "parse_rate",
    "staff_display_name",
    "DashboardStats",
    "aggregate_dashboard_stats",
]
