"""Dashboard and table-header summaries."""

from collections.abc import Sequence

from erp_analytics.analytics.aggregator import compute_inventory_value, compute_revenue, compute_stock_alerts
from erp_analytics.analytics.filters import list_categories
from erp_analytics.analytics.schemas import (
    DashboardStats,
    DashboardSummary,
    InventoryStats,
    OrderStats,
    SupplierStats,
)
from erp_analytics.data.models import Order, Product, Supplier
from erp_analytics.utils import to_local

COMPLETED_STATUSES = frozenset({"shipped", "delivered"})


def stock_status(product: Product) -> str:
    """
    Get the stock badge label for a product.

    Args:
        product: Product to classify

    Returns:
        "Out of Stock", "Low Stock" or "In Stock"
    """
    if product.current_stock == 0:
        return "Out of Stock"
    if product.current_stock <= product.reorder_level:
        return "Low Stock"
    return "In Stock"


def is_low_stock(product: Product) -> bool:
    return product.current_stock <= product.reorder_level


def recent_orders(orders: Sequence[Order], limit: int = 5) -> list[Order]:
    """Newest orders first by creation time."""
    newest_first = sorted(orders, key=lambda o: to_local(o.created_at), reverse=True)
    return newest_first[: max(limit, 0)]


def low_stock_products(products: Sequence[Product], limit: int = 5) -> list[Product]:
    """First ``limit`` low-stock products in input order."""
    return [p for p in products if is_low_stock(p)][: max(limit, 0)]


def build_dashboard_stats(
    products: Sequence[Product],
    orders: Sequence[Order],
    suppliers: Sequence[Supplier],
) -> DashboardStats:
    """Headline counters over the full, unwindowed snapshot."""
    low_stock, _ = compute_stock_alerts(products)
    return DashboardStats(
        total_products=len(products),
        low_stock_items=low_stock,
        total_orders=len(orders),
        pending_orders=sum(1 for o in orders if o.status == "pending"),
        total_revenue=compute_revenue(orders),
        total_suppliers=len(suppliers),
    )


def build_order_stats(orders: Sequence[Order]) -> OrderStats:
    return OrderStats(
        total=len(orders),
        pending=sum(1 for o in orders if o.status == "pending"),
        processing=sum(1 for o in orders if o.status == "processing"),
        completed=sum(1 for o in orders if o.status in COMPLETED_STATUSES),
        revenue=compute_revenue(orders),
    )


def build_inventory_stats(products: Sequence[Product]) -> InventoryStats:
    low_stock, out_of_stock = compute_stock_alerts(products)
    return InventoryStats(
        total_products=len(products),
        categories=tuple(list_categories(products)),
        low_stock_items=low_stock,
        out_of_stock_items=out_of_stock,
        total_value=compute_inventory_value(products),
    )


def build_supplier_stats(suppliers: Sequence[Supplier]) -> SupplierStats:
    active = sum(1 for s in suppliers if s.status == "active")
    return SupplierStats(total=len(suppliers), active=active, inactive=len(suppliers) - active)


def build_dashboard(
    products: Sequence[Product],
    orders: Sequence[Order],
    suppliers: Sequence[Supplier],
    *,
    limit: int = 5,
) -> DashboardSummary:
    """
    Assemble the dashboard page payload.

    Args:
        products: Product snapshot
        orders: Order snapshot
        suppliers: Supplier snapshot
        limit: Number of recent orders and low-stock products to include

    Returns:
        DashboardSummary
    """
    return DashboardSummary(
        stats=build_dashboard_stats(products, orders, suppliers),
        recent_orders=tuple(recent_orders(orders, limit)),
        low_stock_products=tuple(low_stock_products(products, limit)),
    )

