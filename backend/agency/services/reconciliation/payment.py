# backend/agency/services/reconciliation/payment.py
"""
Booking payment status.

Binary status for the payment badge:
  1. explicit paymentStatus wins: "paid" → paid, anything else → pending
  2. otherwise infer from status: paid / final_paid → paid, else pending

deposit_paid is a distinct label on the booking card but NOT fully paid.
"""

from typing import Any

from .config import ReconciliationConfig, get_reconciliation_config
from .records import get_field

PAID = "paid"
PENDING = "pending"

# Badge labels keyed by paymentStatus; status alone never shows a badge
PAYMENT_LABELS = {
    "deposit_paid": "Deposit",
    "final_paid": "Paid",
}


def _explicit_payment_status(booking: Any) -> Any:
    value = get_field(booking, "paymentStatus")
    if value is None or value == "":
        return None
    return value


def payment_summary(
    booking: Any,
    config: ReconciliationConfig | None = None,
) -> str:
    """Return "paid" or "pending" for a booking."""
    config = config or get_reconciliation_config()

    explicit = _explicit_payment_status(booking)
    if explicit is not None:
        return PAID if explicit == PAID else PENDING

    status = get_field(booking, "status")
    if isinstance(status, str) and status in config.paid_statuses:
        return PAID
    return PENDING


def payment_label(booking: Any) -> str | None:
    """Badge label ("Deposit" / "Paid") from paymentStatus, or None."""
    value = _explicit_payment_status(booking)
    if isinstance(value, str):
        return PAYMENT_LABELS.get(value)
    return None
