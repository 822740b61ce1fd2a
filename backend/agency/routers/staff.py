# backend/agency/routers/staff.py

from fastapi import APIRouter

from ..schemas.staff import StaffBookingDaysRead, StaffHistoryRequest
from ..services.booking_queries import staff_booking_history

router = APIRouter(prefix="/staff", tags=["staff"])


@router.post("/{staff_id}/history", response_model=list[StaffBookingDaysRead])
def get_staff_history(staff_id: str, data: StaffHistoryRequest):
    """Bookings the staff member is placed on, with days worked on each."""
    history = staff_booking_history([b.to_document() for b in data.bookings], staff_id)
    return [StaffBookingDaysRead.model_validate(h) for h in history]
