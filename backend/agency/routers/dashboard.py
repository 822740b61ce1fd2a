# backend/agency/routers/dashboard.py

from fastapi import APIRouter

from ..schemas.dashboard import DashboardRequest, DashboardStatsRead
from ..services.reconciliation import aggregate_dashboard_stats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.post("/stats", response_model=DashboardStatsRead)
def get_dashboard_stats(data: DashboardRequest):
    stats = aggregate_dashboard_stats([b.to_document() for b in data.bookings])
    return DashboardStatsRead.model_validate(stats)
