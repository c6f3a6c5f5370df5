"""Print size calculator configuration module.

Loads settings from environment variables and an optional .env file
using pydantic-settings. Invalid values fail fast with a ValidationError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Calculation ──
    default_megapixels: float = Field(
        default=24.0,
        description="Megapixel value used when neither camera nor value is given",
        gt=0,
    )
    min_megapixels: float = Field(
        default=1.0,
        description="Lowest megapixel value accepted from user input",
        gt=0,
    )
    max_megapixels: float = Field(
        default=200.0,
        description="Highest megapixel value accepted from user input",
        gt=0,
    )
    display_decimals: int = Field(
        default=1,
        description="Decimal places for lengths shown to the user",
        ge=0,
        le=4,
    )

    # ── Reference data ──
    reference_data_path: Optional[str] = Field(
        default=None,
        description="JSON file with cameras, quality tiers and paper formats",
    )

    # ── API server ──
    api_host: str = Field(default="127.0.0.1", description="Bind address for the API server")
    api_port: int = Field(default=8040, description="Port for the API server", ge=1, le=65535)

    # ── General ──
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            raise ValueError(f"log_level must be one of {valid}, got '{v}'")
        return upper

    @model_validator(mode="after")
    def validate_megapixel_bounds(self) -> "Settings":
        """Ensure the megapixel input range is not empty."""
        if self.min_megapixels >= self.max_megapixels:
            raise ValueError(
                f"min_megapixels ({self.min_megapixels}) must be below "
                f"max_megapixels ({self.max_megapixels})"
            )
        return self

    @property
    def reference_data_path_resolved(self) -> Optional[Path]:
        """Return the reference data file as a Path, or None for built-in data."""
        if not self.reference_data_path:
            return None
        return Path(self.reference_data_path)

    def megapixels_in_range(self, megapixels: float) -> bool:
        """Check a user-supplied megapixel value against the input bounds."""
        return self.min_megapixels <= megapixels <= self.max_megapixels


def get_settings(**overrides: Any) -> Settings:
    """Create a Settings instance with optional overrides.

    Args:
        **overrides: Key-value pairs to override env/defaults.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If any value fails validation.
    """
    return Settings(**overrides)
