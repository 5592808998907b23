# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./stock_manager.db"

    # Calendar used for "today" on the dashboard and for date-only report bounds
    TIMEZONE: str = "UTC"

    # False restores the legacy behaviour: stock-out past zero clamps silently
    STRICT_STOCK_CHECK: bool = True

    SEED_SAMPLE_DATA: bool = True
    STORAGE_PREFIX: str = "stock_manager_"

    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    DASHBOARD_ALERT_LIMIT: int = 10
    DASHBOARD_RECENT_LIMIT: int = 10

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
