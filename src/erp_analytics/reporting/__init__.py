"""Text reporting for analytics results."""

from erp_analytics.reporting.summary import (
    create_dashboard_summary,
    create_metrics_summary,
    format_currency,
    format_distribution,
    format_top_products,
)

__all__ = [
    "create_dashboard_summary",
    "create_metrics_summary",
    "format_currency",
    "format_distribution",
    "format_top_products",
]
