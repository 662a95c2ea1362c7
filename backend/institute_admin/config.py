"""Centralised application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./institute_admin.db"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    LOG_LEVEL: str = "INFO"

    # Batch lifecycle
    BATCH_WARNING_DAYS: int = 7
    LIFECYCLE_SCHEDULER_ENABLED: bool = False
    LIFECYCLE_CRON_HOUR: int = 0
    LIFECYCLE_CRON_MINUTE: int = 5

    # Number of extra attempts after a failed storage call
    STORAGE_RETRY_ATTEMPTS: int = 1

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
