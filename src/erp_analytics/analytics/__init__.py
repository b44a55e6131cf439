"""Analytics aggregation over product, order and supplier snapshots."""

from erp_analytics.analytics.aggregator import (
    ALLOWED_WINDOWS,
    build_category_distribution,
    build_metrics_snapshot,
    build_revenue_time_series,
    build_status_distribution,
    compute_analytics,
    compute_average_order_value,
    compute_inventory_value,
    compute_revenue,
    compute_stock_alerts,
    filter_by_window,
    rank_top_products,
    validate_window,
)
from erp_analytics.analytics.dashboard import (
    build_dashboard,
    build_inventory_stats,
    build_order_stats,
    build_supplier_stats,
    stock_status,
)
from erp_analytics.analytics.insights import build_insights
from erp_analytics.analytics.filters import list_categories, search_orders, search_products, search_suppliers
from erp_analytics.analytics.schemas import (
    AnalyticsReport,
    DashboardStats,
    DashboardSummary,
    DistributionBucket,
    Insight,
    MetricsSnapshot,
    RankedProduct,
    TimeSeriesPoint,
)

__all__ = [
    "ALLOWED_WINDOWS",
    "AnalyticsReport",
    "DashboardStats",
    "DashboardSummary",
    "DistributionBucket",
    "Insight",
    "MetricsSnapshot",
    "RankedProduct",
    "TimeSeriesPoint",
    "build_category_distribution",
    "build_dashboard",
    "build_insights",
    "build_inventory_stats",
    "build_metrics_snapshot",
    "build_order_stats",
    "build_revenue_time_series",
    "build_status_distribution",
    "build_supplier_stats",
    "compute_analytics",
    "compute_average_order_value",
    "compute_inventory_value",
    "compute_revenue",
    "compute_stock_alerts",
    "filter_by_window",
    "list_categories",
    "rank_top_products",
    "search_orders",
    "search_products",
    "search_suppliers",
    "stock_status",
    "validate_window",
]
