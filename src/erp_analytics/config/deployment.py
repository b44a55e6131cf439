"""Deployment mode configuration and factory patterns."""

import logging
from typing import TYPE_CHECKING

from .settings import Settings, get_settings

if TYPE_CHECKING:
    from erp_analytics.store.base import DataStore

logger = logging.getLogger(__name__)


def get_data_store(settings: Settings | None = None) -> "DataStore":
    """
    Factory function to get the data store selected in settings.

    Args:
        settings: Optional Settings instance. If None, will use get_settings().

    Returns:
        DataStore: Store implementation for the configured backend

    Raises:
        ValueError: If the configured backend is unknown
    """
    if settings is None:
        settings = get_settings()

    if settings.data_backend == "json":
        logger.info(f"Using JSON data store at {settings.data_dir}")
        from erp_analytics.store.json_store import JsonDataStore

        return JsonDataStore(data_dir=settings.data_dir)

    elif settings.data_backend == "memory":
        logger.info("Using in-memory data store")
        from erp_analytics.store.memory_store import MemoryDataStore

        return MemoryDataStore()

    else:
        raise ValueError(f"Invalid data backend: {settings.data_backend}")


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure logging based on deployment mode.

    Args:
        settings: Optional Settings instance. If None, will use get_settings().
    """
    if settings is None:
        settings = get_settings()

    if settings.deployment_mode == "production":
        # Production: less verbose logging
        logging.basicConfig(
            level=settings.log_level or logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        # Local development: more verbose logging
        logging.basicConfig(
            level=settings.log_level or logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        )

    logger.info(f"Logging configured for deployment mode: {settings.deployment_mode}")
