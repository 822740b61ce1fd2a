# backend/agency/config.py

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]  # repo root


class Settings(BaseSettings):
    app_title: str = "Smith Agency Staffing API"
    log_level: str = "INFO"

    # Payroll is computed as days × hours_per_day × hourly rate
    payroll_hours_per_day: float = 9
    cancelled_status: str = "cancelled"

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        extra="ignore",
    )


settings = Settings()
