"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file).
The engine itself is pure and takes no settings; only the entry point and
tool layer read them.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatchingSettings(BaseSettings):
    """Catalog source and lever thresholds."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    catalog_path: Path | None = Field(
        default=None,
        description="JSON lender catalog; the built-in seed catalog is used when unset",
    )
    lever_target_matches: int = Field(
        default=3,
        ge=1,
        description="Offer funding levers while fewer than this many lenders qualify",
    )


class Settings(BaseSettings):
    """Root settings.

    Usage:
        settings = Settings()
        settings.log_level
        settings.matching.catalog_path
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    matching: MatchingSettings = Field(default_factory=MatchingSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton, import this wherever settings are needed.
settings = Settings()
