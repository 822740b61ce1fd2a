import logging

from fastapi import FastAPI

from .config import settings
from .routers import bookings, dashboard, shows, staff

logging.basicConfig(level=settings.log_level)

app = FastAPI(title=settings.app_title)

app.include_router(bookings.router)
app.include_router(shows.router)
app.include_router(dashboard.router)
app.include_router(staff.router)


@app.get("/health")
def health():
    return {"status": "ok"}
