"""Observability module for LangFuse tracing."""

from erp_analytics.observability.decorators import trace
from erp_analytics.observability.langfuse_client import (
    create_span,
    flush_langfuse,
    get_langfuse_client,
    log_export_event,
    reset_langfuse_client,
)

__all__ = ["get_langfuse_client", "reset_langfuse_client", "trace", "create_span", "log_export_event", "flush_langfuse"]
