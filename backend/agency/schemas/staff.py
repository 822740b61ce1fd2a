# backend/agency/schemas/staff.py

from typing import Any, Optional
from pydantic import BaseModel, Field

from .bookings import Booking


class Staff(BaseModel):
    id: str
    name: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None

    # number or numeric string ("22", "22/hr")
    pay_rate: Any = Field(default=None, alias="payRate")

    model_config = {"populate_by_name": True, "extra": "allow"}

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


class StaffHistoryRequest(BaseModel):
    bookings: list[Booking] = Field(default_factory=list)


class StaffBookingDaysRead(BaseModel):
    booking_id: Optional[str] = None
    show_id: Optional[str] = None
    client_id: Optional[str] = None
    status: Optional[str] = None
    days_worked: int

    model_config = {"from_attributes": True}
