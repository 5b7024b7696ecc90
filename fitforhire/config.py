"""Application configuration and settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "FitForHire API"
    app_version: str = "0.1.0"
    debug: bool = False
    api_prefix: str = "/api"

    @field_validator("api_prefix", mode="before")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        """Ensure the prefix has a leading slash and no trailing slash."""
        v = (v or "").strip().strip("/")
        return f"/{v}" if v else ""

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
