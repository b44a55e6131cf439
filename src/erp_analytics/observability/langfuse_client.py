"""
LangFuse access for analytics tracing.

Every helper is a no-op while tracing is disabled, and LangFuse errors are
logged rather than raised, so analytics results never depend on the
tracing backend being reachable.
"""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

_langfuse_client = None
_init_failed = False


def get_langfuse_client():
    """
    Get the shared LangFuse client, creating it on first use.

    A failed initialization is remembered until reset_langfuse_client()
    so it is not retried for every traced call.

    Returns:
        Langfuse client instance or None if tracing is disabled or unavailable
    """
    global _langfuse_client, _init_failed

    if _langfuse_client is not None or _init_failed:
        return _langfuse_client

    from erp_analytics.config.settings import get_settings

    settings = get_settings()
    if not settings.langfuse_enabled:
        logger.debug("LangFuse tracing is disabled")
        return None

    try:
        from langfuse import Langfuse

        _langfuse_client = Langfuse(
            public_key=settings.langfuse_public_key,
            secret_key=settings.langfuse_secret_key,
            host=settings.langfuse_host,
        )
    except Exception as e:
        logger.error(f"LangFuse unavailable, analytics will run untraced: {e}")
        _init_failed = True
        return None

    logger.info(f"Tracing analytics to LangFuse at {settings.langfuse_host}")
    return _langfuse_client


def reset_langfuse_client() -> None:
    """Drop the cached client so the next call re-reads settings."""
    global _langfuse_client, _init_failed
    _langfuse_client = None
    _init_failed = False


def _with_client(action: str, call: Callable[[Any], Any]) -> Any:
    client = get_langfuse_client()
    if client is None:
        return None

    try:
        return call(client)
    except Exception as e:
        logger.error(f"LangFuse {action} failed: {e}")
        return None


def create_span(name: str, metadata: dict | None = None):
    """
    Open a span for one analytics operation.

    The caller must end the returned span with span.end().

    Args:
        name: Operation name (e.g. "analytics_report")
        metadata: Operation type and code location

    Returns:
        LangfuseSpan object or None when tracing is off
    """
    return _with_client("span creation", lambda client: client.start_span(name=name, metadata=metadata))


def log_export_event(
    export_kind: str,
    *,
    window_days: int | None = None,
    record_counts: dict[str, int] | None = None,
    account_id: str | None = None,
) -> None:
    """
    Record that analytics or backup data was exported.

    Args:
        export_kind: "analytics" or "data_backup"; the event is named "<kind>_exported"
        window_days: Window of an analytics export
        record_counts: Records per type in a backup
        account_id: Account the export was scoped to
    """
    _with_client(
        "export event",
        lambda client: client.create_event(
            name=f"{export_kind}_exported",
            input={"window_days": window_days} if window_days is not None else None,
            output=record_counts,
            metadata={"account_id": account_id},
        ),
    )


def flush_langfuse() -> None:
    """Send buffered traces, if a client was ever created."""
    if _langfuse_client is None:
        return

    try:
        _langfuse_client.flush()
        logger.debug("Flushed LangFuse traces")
    except Exception as e:
        logger.error(f"LangFuse flush failed: {e}")
