"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # App Settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: str = "*"

    # Seed data (JSON file); built-in fixtures when unset
    WISHLIST_FIXTURES_PATH: Optional[str] = None

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins as list of strings."""
        if not self.CORS_ALLOW_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]


settings = Settings()
