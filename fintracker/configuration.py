"""Mini README: Centralised configuration models and helpers for the tracker.

Structure:
    * TrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables, toggle production
    behaviour, and specify the local port the tracker page is served on. The
    configuration is cached so the cost of validation is incurred only once
    per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerSettings(BaseSettings):
    """Runtime configuration for the financial tracker."""

    model_config = SettingsConfigDict(
        env_prefix="FINTRACKER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the tracker page to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the tracker page is served on.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field(
        "₱",
        description="Fixed currency glyph prefixed to every displayed amount.",
    )
    application_title: str = Field(
        "Enhanced Financial Tracker",
        description="Window title and heading shown in the about dialog.",
    )
    application_version: str = Field("1.0", description="Version shown in the about dialog.")

    @field_validator("currency_symbol")
    @classmethod
    def _require_symbol(cls, value: str) -> str:
        """Reject blank currency glyphs so amounts stay unambiguous."""

        if not value.strip():
            raise ValueError("currency_symbol must not be blank")
        return value.strip()

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"

    @property
    def log_level(self) -> int:
        """Verbose logging everywhere except production."""

        return logging.INFO if self.is_production else logging.DEBUG


@lru_cache()
def get_settings() -> TrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return TrackerSettings()
