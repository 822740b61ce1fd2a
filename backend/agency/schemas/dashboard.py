# backend/agency/schemas/dashboard.py

from pydantic import BaseModel, Field

from .bookings import Booking


class DashboardRequest(BaseModel):
    bookings: list[Booking] = Field(default_factory=list)


class DashboardStatsRead(BaseModel):
    total_active_dates: int
    total_staff_days: int = Field(description="Staff-days needed (demand), not filled")
    total_assigned_slots: int
    total_needed_slots: int
    utilization_percentage: int
    active_bookings: int
    unique_staff_assigned: int
    total_revenue: float

    model_config = {"from_attributes": True}
