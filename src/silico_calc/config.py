"""
Configuration management for Silico Calculator.

Handles loading configuration from environment variables and an optional
``.env`` file, and provides sensible defaults for all settings.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from silico_calc.models import GlyphVariant


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SILICO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "Silico Calculator"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Evaluation settings
    glyph_variant: GlyphVariant = GlyphVariant.UNICODE
    precision: int = Field(default=8, ge=1, le=15)  # Fractional digits for non-integral results


class KeypadConfig(BaseSettings):
    """Terminal keypad configuration."""

    model_config = SettingsConfigDict(env_prefix="SILICO_KEYPAD_")

    show_keypad: bool = True
    screen_width: int = Field(default=24, ge=8)


# Global settings instance
settings = Settings()
keypad_config = KeypadConfig()
