"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "BandWatch Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Redis (recent search list)
    redis_url: str = "redis://localhost:6379"

    # CORS
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Data provider: alpha_vantage, yahoo, mock
    data_provider: str = "alpha_vantage"
    alpha_vantage_api_key: Optional[str] = None
    alpha_vantage_base_url: str = "https://www.alphavantage.co/query"
    request_timeout_seconds: float = 15.0

    # Analysis
    lookback_days: int = 120
    bollinger_window: int = 20

    # Recent searches
    recent_search_capacity: int = 5
    recent_search_key: str = "recent_stock_searches"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
