from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application configuration loaded from environment variables and .env file."""

    # General
    app_name: str = "HomeSearch"
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_allow_origins: str = "*"  # comma-separated list in production

    # HTTP client
    http_timeout_seconds: int = 20

    # RentCast (live listings); no key means sample data only
    rentcast_api_key: Optional[str] = None
    rentcast_base_url: str = "https://api.rentcast.io/v1"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def has_rentcast_api_key(self) -> bool:
        return bool(self.rentcast_api_key)


settings = Settings()


def get_settings() -> Settings:
    """Get settings instance (for dependency injection)"""
    return settings
