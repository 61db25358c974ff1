"""Configuration settings for the match analytics package."""

from __future__ import annotations

from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Analytics settings loaded from environment variables."""

    # Application Configuration
    log_level: str = Field(default="INFO")

    # Resource resolution
    ddragon_cdn_base: str = Field(
        default="https://ddragon.leagueoflegends.com/cdn",
        description="Root that resolved image paths are relative to",
    )

    # Presentation
    match_window_size: int = Field(default=25, ge=0)
    match_window_step: int = Field(default=10, ge=1)
    champion_table_limit: int = Field(default=10, ge=1)
    display_timezone: Optional[str] = Field(
        default=None,
        description="IANA zone used for date grouping; unset means host local time",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name.

        Raises:
            ValueError: If the level is not a standard logging level name
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("display_timezone")
    @classmethod
    def validate_display_timezone(cls, v: Optional[str]) -> Optional[str]:
        """Reject zone names the tz database does not know."""
        if not v:
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @property
    def display_tz(self) -> Optional[tzinfo]:
        """Get the configured display zone, or None for host local time."""
        return ZoneInfo(self.display_timezone) if self.display_timezone else None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="ANALYTICS_",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
