"""
Metrics aggregation over product and order snapshots.

Every function here is pure: inputs are read, never mutated, and the same
inputs (with the same ``now``) always produce the same outputs. The only
error raised is ``InvalidParameterError`` for a window outside
``ALLOWED_WINDOWS``, and it is raised before any work is done.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime, timedelta

from erp_analytics.analytics.schemas import (
    AnalyticsReport,
    DistributionBucket,
    MetricsSnapshot,
    RankedProduct,
    TimeSeriesPoint,
)
from erp_analytics.data.models import Order, Product
from erp_analytics.exceptions import InvalidParameterError
from erp_analytics.utils import capitalize_label, format_day_label, local_date, local_now, to_local

logger = logging.getLogger(__name__)

ALLOWED_WINDOWS: frozenset[int] = frozenset({7, 30, 90, 365})
DEFAULT_TOP_LIMIT = 5


def validate_window(days: object) -> int:
    """
    Check that a window size is one of the supported values.

    Args:
        days: Requested window size in days

    Returns:
        The window size as an int

    Raises:
        InvalidParameterError: If days is not an int in ALLOWED_WINDOWS
    """
    if isinstance(days, bool) or not isinstance(days, int) or days not in ALLOWED_WINDOWS:
        raise InvalidParameterError(
            f"Invalid window: {days!r}. Must be one of {sorted(ALLOWED_WINDOWS)}"
        )
    return days


def is_revenue_order(order: Order) -> bool:
    """Sales orders count toward revenue unless cancelled."""
    return order.type == "sales" and order.status != "cancelled"


def filter_by_window(orders: Sequence[Order], days: int, now: datetime | None = None) -> list[Order]:
    """
    Keep orders created within the trailing window.

    The cutoff is local wall-clock time, so a daylight saving change
    inside the window does not move it by an hour.

    Args:
        orders: Orders to filter
        days: Window size (one of ALLOWED_WINDOWS)
        now: Reference time (defaults to the current local time)

    Returns:
        New list with orders whose created_at >= the cutoff
    """
    days = validate_window(days)
    local = to_local(now or local_now())
    cutoff = (local.replace(tzinfo=None) - timedelta(days=days)).astimezone()
    return [order for order in orders if to_local(order.created_at) >= cutoff]


def compute_revenue(orders: Sequence[Order]) -> float:
    """Sum totals of non-cancelled sales orders."""
    return sum((order.total for order in orders if is_revenue_order(order)), 0.0)


def compute_average_order_value(orders: Sequence[Order]) -> float:
    """
    Average total across all given orders.

    Returns 0.0 for an empty sequence.
    """
    if not orders:
        return 0.0
    return sum(order.total for order in orders) / len(orders)


def compute_stock_alerts(products: Sequence[Product]) -> tuple[int, int]:
    """
    Count low-stock and out-of-stock products.

    A product with zero stock is counted in both figures.

    Args:
        products: Products to inspect

    Returns:
        Tuple of (low_stock, out_of_stock)
    """
    low_stock = sum(1 for p in products if p.current_stock <= p.reorder_level)
    out_of_stock = sum(1 for p in products if p.current_stock == 0)
    return low_stock, out_of_stock


def compute_inventory_value(products: Sequence[Product]) -> float:
    """Sum of stock x cost over all products."""
    return sum((p.current_stock * p.cost for p in products), 0.0)


def build_revenue_time_series(
    orders: Sequence[Order],
    days: int,
    now: datetime | None = None,
) -> list[TimeSeriesPoint]:
    """
    Build one revenue point per calendar day of the window.

    The series always has exactly ``days`` points, oldest first, ending
    today. Days without revenue orders get a zero point.

    Args:
        orders: Orders, usually already filtered to the window
        days: Window size (one of ALLOWED_WINDOWS)
        now: Reference time (defaults to the current local time)

    Returns:
        List of TimeSeriesPoint in ascending date order
    """
    days = validate_window(days)
    today = to_local(now or local_now()).date()

    revenue_by_day: dict[date, float] = {}
    count_by_day: dict[date, int] = {}
    for order in orders:
        if not is_revenue_order(order):
            continue
        day = local_date(order.created_at)
        revenue_by_day[day] = revenue_by_day.get(day, 0.0) + order.total
        count_by_day[day] = count_by_day.get(day, 0) + 1

    series = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        series.append(
            TimeSeriesPoint(
                date=day,
                label=format_day_label(day),
                revenue=revenue_by_day.get(day, 0.0),
                orders=count_by_day.get(day, 0),
            )
        )
    return series


def _count_by(values: Sequence[str]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def build_status_distribution(orders: Sequence[Order]) -> list[DistributionBucket]:
    """One bucket per order status present, in first-seen order."""
    counts = _count_by([order.status for order in orders])
    return [DistributionBucket(name=capitalize_label(status), value=count) for status, count in counts.items()]


def build_category_distribution(products: Sequence[Product]) -> list[DistributionBucket]:
    """One bucket per product category present, in first-seen order."""
    counts = _count_by([product.category for product in products])
    return [DistributionBucket(name=category, value=count) for category, count in counts.items()]


def rank_top_products(products: Sequence[Product], limit: int = DEFAULT_TOP_LIMIT) -> list[RankedProduct]:
    """
    Rank products by estimated stock value.

    Estimated value is ``price * max(0, current_stock)``. Ties keep their
    input order. A non-positive limit yields an empty list.

    Args:
        products: Products to rank
        limit: Maximum number of results

    Returns:
        Up to ``limit`` RankedProduct entries, highest value first
    """
    ranked = [
        RankedProduct(
            name=product.name,
            revenue=product.price * max(0, product.current_stock),
            stock=product.current_stock,
            category=product.category,
        )
        for product in products
    ]
    # sorted() is stable with reverse=True, so equal values keep input order
    ranked = sorted(ranked, key=lambda item: item.revenue, reverse=True)
    return ranked[: max(limit, 0)]


def build_metrics_snapshot(products: Sequence[Product], windowed_orders: Sequence[Order]) -> MetricsSnapshot:
    """
    Compute the scalar KPIs.

    Args:
        products: Full product list (not windowed)
        windowed_orders: Orders already filtered to the window

    Returns:
        MetricsSnapshot
    """
    low_stock, out_of_stock = compute_stock_alerts(products)
    return MetricsSnapshot(
        total_revenue=compute_revenue(windowed_orders),
        total_orders=len(windowed_orders),
        average_order_value=compute_average_order_value(windowed_orders),
        low_stock_items=low_stock,
        out_of_stock_items=out_of_stock,
        total_products=len(products),
        inventory_value=compute_inventory_value(products),
    )


def compute_analytics(
    products: Sequence[Product],
    orders: Sequence[Order],
    days: int,
    *,
    now: datetime | None = None,
    top_limit: int = DEFAULT_TOP_LIMIT,
) -> AnalyticsReport:
    """
    Run a full aggregation pass for the analytics view.

    Args:
        products: Product snapshot
        orders: Order snapshot
        days: Window size (one of ALLOWED_WINDOWS)
        now: Reference time (defaults to the current local time)
        top_limit: Number of top products to return

    Returns:
        AnalyticsReport with metrics, revenue trend, distributions and top products

    Raises:
        InvalidParameterError: If days is not a supported window
    """
    days = validate_window(days)
    now = to_local(now or local_now())

    windowed = filter_by_window(orders, days, now=now)
    logger.debug(f"Aggregating {len(products)} products and {len(windowed)}/{len(orders)} orders over {days} days")

    return AnalyticsReport(
        window_days=days,
        generated_at=now,
        metrics=build_metrics_snapshot(products, windowed),
        revenue_trend=tuple(build_revenue_time_series(windowed, days, now=now)),
        order_status=tuple(build_status_distribution(windowed)),
        top_products=tuple(rank_top_products(products, limit=top_limit)),
        categories=tuple(build_category_distribution(products)),
    )
