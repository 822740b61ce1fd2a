# backend/agency/services/reconciliation/config.py
"""
Reconciliation configuration.
"""

from dataclasses import dataclass
from functools import lru_cache

from ...config import settings


@dataclass(frozen=True)
class ReconciliationConfig:
    """
    Configuration for staffing/payment reconciliation.

    Attributes:
        hours_per_day: Billable hours per assigned staff-day (payroll)
        cancelled_status: Booking status excluded from dashboard rollups
        paid_statuses: Booking statuses that count as fully paid
            when no explicit paymentStatus is set
    """
    hours_per_day: float = 9
    cancelled_status: str = "cancelled"
    paid_statuses: frozenset[str] = frozenset({"paid", "final_paid"})

    def __post_init__(self):
        """Validate configuration."""
        if self.hours_per_day <= 0:
            raise ValueError(f"hours_per_day must be positive, got {self.hours_per_day}")


@lru_cache
def get_reconciliation_config() -> ReconciliationConfig:
    """Get reconciliation configuration (singleton, built from settings)."""
    return ReconciliationConfig(
        hours_per_day=settings.payroll_hours_per_day,
        cancelled_status=settings.cancelled_status,
    )
