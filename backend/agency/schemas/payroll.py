# backend/agency/schemas/payroll.py

from typing import Any, Optional
from pydantic import BaseModel, Field

from .bookings import Booking
from .staff import Staff


class PayrollRequest(BaseModel):
    bookings: list[Booking] = Field(default_factory=list)
    staff: list[Staff] = Field(default_factory=list)
    hours_per_day: Optional[float] = Field(default=None, alias="hoursPerDay", gt=0)

    model_config = {"populate_by_name": True}


class PayrollEntryRead(BaseModel):
    staff_id: Any
    name: str
    rate: float
    days_worked: int
    total_owed: float

    model_config = {"from_attributes": True}


class ShowPayrollRead(BaseModel):
    show_id: Optional[str] = None
    hours_per_day: float
    entries: list[PayrollEntryRead]
    grand_total: float

    model_config = {"from_attributes": True}
