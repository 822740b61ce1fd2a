# backend/agency/schemas/bookings.py

from typing import Any, Optional
from pydantic import BaseModel, Field


class DateRequirement(BaseModel):
    date: Optional[str] = None
    staff_count: Optional[int] = Field(default=0, alias="staffCount")
    staff_ids: list[Optional[str]] = Field(default_factory=list, alias="staffIds")

    model_config = {"populate_by_name": True, "extra": "allow"}


class Booking(BaseModel):
    """Booking document as stored (camelCase keys)."""
    id: Optional[str] = None
    client_id: Optional[str] = Field(default=None, alias="clientId")
    show_id: Optional[str] = Field(default=None, alias="showId")

    status: Optional[str] = None
    payment_status: Optional[str] = Field(default=None, alias="paymentStatus")

    dates_needed: Optional[list[DateRequirement]] = Field(default=None, alias="datesNeeded")
    revenue: Optional[float] = None
    notes: Optional[str] = None

    created_at: Any = Field(default=None, alias="createdAt")
    updated_at: Any = Field(default=None, alias="updatedAt")

    model_config = {"populate_by_name": True, "extra": "allow"}

    def to_document(self) -> dict:
        """Back to the raw document shape consumed by the reconciliation engine."""
        return self.model_dump(by_alias=True)


class BookingSearchRequest(BaseModel):
    bookings: list[Booking] = Field(default_factory=list)
    client_id: Optional[str] = Field(default=None, alias="clientId")
    show_id: Optional[str] = Field(default=None, alias="showId")
    staff_id: Optional[str] = Field(default=None, alias="staffId")
    status: Optional[str] = None
    date: Optional[str] = None

    model_config = {"populate_by_name": True}


class StaffingSummaryRead(BaseModel):
    active_date_count: int
    total_staff_days_needed: int
    total_staff_days_assigned: int
    staffing_status: str
    unfilled_by_date: dict[str, int]
    completion_percentage: int

    model_config = {"from_attributes": True}


class DateRangeRead(BaseModel):
    first_date: str
    last_date: str

    model_config = {"from_attributes": True}


class BookingSummaryRead(BaseModel):
    booking_id: Optional[str] = None
    staffing: StaffingSummaryRead
    payment_status: str
    payment_label: Optional[str] = None
    date_range: Optional[DateRangeRead] = None

    model_config = {"from_attributes": True}
