"""Application configuration using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

AVAILABILITY_URL = "https://www.turkishairlines.com/api/v1/availability"

# Sent verbatim with every availability request.
AVAILABILITY_HEADERS: dict[str, str] = {
    "Accept": "application/json, text/plain, */*",
    "Content-Type": "application/json",
    "X-Bfp": "eefd623666b7d32de067e67c19cdbcbe",
    "X-Clientid": "fdc44a1f-aaee-46bd-aaa3-3f8539ee3bc8",
    "X-Conversationid": "68006240-6101-4a7e-9dc2-c384d695ca9c",
    "X-Country": "int",
    "X-Requestid": "b604f200-7ba5-45b7-a80d-e769f76e16af",
}


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="TRIPZI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port", gt=0, le=65535)
    reload: bool = Field(default=True, description="Enable auto-reload in development")

    # Availability API settings
    availability_url: str = Field(
        default=AVAILABILITY_URL,
        description="Absolute URL of the airline availability resource",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Timeout for the availability request (seconds)",
        gt=0,
        le=300,
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get application settings (singleton).

    Returns:
        Settings instance
    """
    return Settings()
