# backend/agency/routers/shows.py

from fastapi import APIRouter

from ..schemas.payroll import PayrollRequest, ShowPayrollRead
from ..services.booking_queries import bookings_for_show
from ..services.reconciliation import compute_payroll

router = APIRouter(prefix="/shows", tags=["shows"])


@router.post("/{show_id}/payroll", response_model=ShowPayrollRead)
def get_show_payroll(show_id: str, data: PayrollRequest):
    """Payroll for the posted bookings that belong to this show."""
    bookings = bookings_for_show([b.to_document() for b in data.bookings], show_id)
    payroll = compute_payroll(
        bookings,
        [s.to_document() for s in data.staff],
        hours_per_day=data.hours_per_day,
        show_id=show_id,
    )
    return ShowPayrollRead.model_validate(payroll)
