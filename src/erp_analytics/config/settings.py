"""Application settings using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Mirrors erp_analytics.analytics.aggregator.ALLOWED_WINDOWS
_ALLOWED_WINDOWS = (7, 30, 90, 365)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Deployment configuration
    deployment_mode: Literal["production", "local"] = Field(
        default="local",
        description="Deployment mode: production (quieter logging) or local",
    )
    log_level: str | None = Field(
        default=None,
        description="Override log level (defaults to INFO in production, DEBUG locally)",
    )

    # Data store configuration
    data_backend: Literal["json", "memory"] = Field(
        default="json",
        description="Record source: json (files in data_dir) or memory (empty in-process store)",
    )
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding products.json, orders.json and suppliers.json",
    )
    account_id: str | None = Field(
        default=None,
        description="Only include records owned by this account (user_id)",
    )

    # Analytics configuration
    default_window_days: int = Field(
        default=30,
        description="Default analytics window in days (7, 30, 90 or 365)",
    )
    top_products_limit: int = Field(
        default=5,
        ge=1,
        description="Number of products in the top-products ranking",
    )
    recent_items_limit: int = Field(
        default=5,
        ge=1,
        description="Number of recent orders and low-stock products on the dashboard",
    )

    # LangFuse observability configuration
    langfuse_enabled: bool = Field(
        default=False,
        description="Enable LangFuse tracing",
    )
    langfuse_public_key: str | None = Field(
        default=None,
        description="LangFuse public key",
    )
    langfuse_secret_key: str | None = Field(
        default=None,
        description="LangFuse secret key",
    )
    langfuse_host: str = Field(
        default="https://cloud.langfuse.com",
        description="LangFuse host URL",
    )

    # Sample data configuration
    sample_data_products_count: int = Field(
        default=200,
        description="Number of sample products to generate",
    )
    sample_data_suppliers_count: int = Field(
        default=25,
        description="Number of sample suppliers to generate",
    )
    sample_data_orders_count: int = Field(
        default=1500,
        description="Number of sample orders to generate",
    )
    sample_data_days: int = Field(
        default=365,
        description="Number of days of order history to generate",
    )

    @field_validator("default_window_days")
    @classmethod
    def validate_default_window(cls, v: int) -> int:
        """Validate that the default window is a supported value."""
        if v not in _ALLOWED_WINDOWS:
            raise ValueError(f"Invalid default_window_days: {v}. Must be one of {list(_ALLOWED_WINDOWS)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Normalize and validate the log level name."""
        if v is None:
            return v
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Invalid log level: {v}")
        return level

    def validate_observability(self) -> None:
        """Disable LangFuse tracing when its credentials are missing."""
        if self.langfuse_enabled:
            if not self.langfuse_public_key or not self.langfuse_secret_key:
                logger.warning("LangFuse is enabled but credentials are missing. Disabling LangFuse tracing.")
                self.langfuse_enabled = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.validate_observability()
    return settings
