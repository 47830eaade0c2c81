"""
API configuration settings.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """API settings."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Catalog snapshot directory (defaults to the bundled data/)
    DATA_DIR: Optional[str] = None

    # Local review-history storage
    STORAGE_PATH: str = ".rift_trainer/storage.db"
    HISTORY_KEY: str = "skills-trainer-history"

    # Sessions
    HISTORY_DISPLAY_LIMIT: int = 10
    MAX_SESSIONS: int = 100

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        env_prefix = "RIFT_"


settings = Settings()
