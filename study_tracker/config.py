"""Application configuration."""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        """Initialize settings from environment variables."""
        # API Settings
        self.API_TITLE: str = os.getenv("API_TITLE", "Study Tracker")
        self.API_VERSION: str = os.getenv("API_VERSION", "0.1.0")
        self.DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development").lower()
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Optional API key for /api routes (empty means open access)
        self.API_KEY: str = os.getenv("API_KEY", "")

        # Server Settings
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "8000"))

        # Database Settings
        self.DB_HOST: str = os.getenv("DB_HOST", "localhost")
        self.DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
        self.DB_USER: str = os.getenv("DB_USER", "postgres")
        self.DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
        self.DB_NAME: str = os.getenv("DB_NAME", "study_tracker")
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "")
        self.RUN_MIGRATIONS: bool = (
            os.getenv("RUN_MIGRATIONS", "True").lower() == "true"
        )

        # Selected profile cookie lifetime, one year by default
        self.PROFILE_COOKIE_MAX_AGE: int = int(
            os.getenv("PROFILE_COOKIE_MAX_AGE", str(60 * 60 * 24 * 365))
        )

    @property
    def is_production(self) -> bool:
        """Whether the service runs in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def api_key_required(self) -> bool:
        """Whether /api routes require the X-API-KEY header."""
        return bool(self.API_KEY)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
