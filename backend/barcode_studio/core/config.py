"""
Application configuration using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The configuration hierarchy allows for environment-specific overrides
    while maintaining secure defaults for production deployments.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Core Application Settings
    # ==========================================================================
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # API Configuration
    api_v1_prefix: str = "/api/v1"
    project_name: str = "Barcode Studio"
    version: str = "0.1.0"

    # CORS settings
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:5173",
            "http://localhost:3000",
        ]
    )

    # ==========================================================================
    # QR Rendering
    # ==========================================================================
    qr_size: int = Field(default=200, ge=21, le=4000, description="QR image width in pixels")
    qr_margin: int = Field(default=2, ge=0, le=16, description="Quiet zone in modules")
    qr_error_correction: Literal["L", "M", "Q", "H"] = Field(default="L")
    qr_foreground_color: str = Field(default="#000000", pattern=r"^#?[0-9A-Fa-f]{6}$")
    qr_background_color: str = Field(default="#FFFFFF", pattern=r"^#?[0-9A-Fa-f]{6}$")

    # ==========================================================================
    # Request Limits
    # ==========================================================================
    batch_max_items: int = Field(
        default=100,
        ge=1,
        description="Maximum number of barcode requests accepted in one batch",
    )
    zpl_max_length: int = Field(
        default=65536,
        ge=1,
        description="Maximum accepted ZPL document length in characters",
    )

    # ==========================================================================
    # Production Safety Checks
    # ==========================================================================

    _DEFAULT_CORS_ORIGINS = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    @model_validator(mode="after")
    def _validate_production_settings(self) -> Self:
        """Enforce critical settings in production/staging."""
        if self.environment in ("production", "staging"):
            if self.debug:
                raise ValueError(f"debug must be False in {self.environment} environment")
            if self.cors_origins == self._DEFAULT_CORS_ORIGINS:
                raise ValueError(
                    f"cors_origins must be explicitly configured in {self.environment} environment"
                )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Using lru_cache ensures settings are loaded once and reused,
    avoiding repeated environment variable parsing.
    """
    return Settings()
