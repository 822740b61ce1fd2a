# backend/agency/routers/bookings.py
# Stateless: every request carries its own booking snapshot.

from fastapi import APIRouter

from ..schemas.bookings import (
    Booking,
    BookingSearchRequest,
    BookingSummaryRead,
    DateRangeRead,
    StaffingSummaryRead,
)
from ..services.booking_queries import search_bookings
from ..services.reconciliation import (
    date_range_summary,
    payment_label,
    payment_summary,
    staffing_summary,
)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("/summary", response_model=BookingSummaryRead)
def summarize_booking(data: Booking):
    """Staffing, payment and date range for one booking."""
    doc = data.to_document()
    date_range = date_range_summary(doc)

    return BookingSummaryRead(
        booking_id=data.id,
        staffing=StaffingSummaryRead.model_validate(staffing_summary(doc)),
        payment_status=payment_summary(doc),
        payment_label=payment_label(doc),
        date_range=DateRangeRead.model_validate(date_range) if date_range else None,
    )


@router.post("/search", response_model=list[Booking])
def search(data: BookingSearchRequest):
    docs = [b.to_document() for b in data.bookings]
    return search_bookings(
        docs,
        client_id=data.client_id,
        show_id=data.show_id,
        staff_id=data.staff_id,
        status=data.status,
        date=data.date,
    )
