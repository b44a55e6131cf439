"""Plain-text rendering of analytics and dashboard results."""

import logging
from collections.abc import Sequence

from erp_analytics.analytics.dashboard import stock_status
from erp_analytics.analytics.insights import build_insights
from erp_analytics.analytics.schemas import AnalyticsReport, DashboardSummary, DistributionBucket

logger = logging.getLogger(__name__)

WINDOW_LABELS = {7: "Last 7 days", 30: "Last 30 days", 90: "Last 90 days", 365: "Last year"}


def format_currency(value: float) -> str:
    """Format an amount as dollars with thousands separators."""
    return f"${value:,.2f}"


def format_distribution(buckets: Sequence[DistributionBucket]) -> list[list[str]]:
    """
    Format distribution buckets as table rows with percentage share.

    Args:
        buckets: Distribution buckets

    Returns:
        List of rows [name, count, share]
    """
    total = sum(b.value for b in buckets)
    if not total:
        return [["No data", "", ""]]

    return [[b.name, str(b.value), f"{b.value / total * 100:.1f}%"] for b in buckets]


def format_top_products(report: AnalyticsReport) -> list[list[str]]:
    """
    Format the top-products ranking as table rows.

    Args:
        report: Analytics report

    Returns:
        List of rows [rank, name, category, stock, value]
    """
    if not report.top_products:
        return [["", "No products", "", "", ""]]

    return [
        [str(rank), p.name, p.category, str(p.stock), format_currency(p.revenue)]
        for rank, p in enumerate(report.top_products, 1)
    ]


def _format_table(rows: list[list[str]]) -> str:
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    return "\n".join("  " + "  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows)


def create_metrics_summary(report: AnalyticsReport) -> str:
    """
    Create summary text for an analytics report.

    Args:
        report: Analytics report

    Returns:
        Formatted summary string
    """
    m = report.metrics
    window = WINDOW_LABELS.get(report.window_days, f"Last {report.window_days} days")
    peak = max(report.revenue_trend, key=lambda p: p.revenue, default=None)
    peak_line = f"{peak.label} ({format_currency(peak.revenue)})" if peak and peak.revenue > 0 else "—"
    insights = build_insights(report)
    insight_lines = "\n".join(f"- {i.title}: {i.message}" for i in insights) or "- No insights for this period"

    return f"""📊 **Analytics & Reports** ({window})

**Sales:**
- Total Revenue: {format_currency(m.total_revenue)}
- Total Orders: {m.total_orders}
- Avg Order Value: {format_currency(m.average_order_value)}
- Best Day: {peak_line}

**Inventory:**
- Total Products: {m.total_products}
- Low Stock Items: {m.low_stock_items}
- Out of Stock: {m.out_of_stock_items}
- Inventory Value: {format_currency(m.inventory_value)}

**Order Status:**
{_format_table(format_distribution(report.order_status))}

**Top Products:**
{_format_table(format_top_products(report))}

**Categories:**
{_format_table(format_distribution(report.categories))}

**Business Insights:**
{insight_lines}

Last updated: {report.generated_at.strftime("%Y-%m-%d %H:%M:%S")}
"""


def create_dashboard_summary(summary: DashboardSummary) -> str:
    """
    Create summary text for the dashboard page.

    Args:
        summary: Dashboard payload

    Returns:
        Formatted summary string
    """
    s = summary.stats
    lines = [
        "📦 **Dashboard**",
        "",
        f"- Total Products: {s.total_products}",
        f"- Low Stock Alert: {s.low_stock_items}",
        f"- Total Orders: {s.total_orders} ({s.pending_orders} pending)",
        f"- Total Revenue: {format_currency(s.total_revenue)}",
        f"- Suppliers: {s.total_suppliers}",
        "",
        "**Recent Orders:**",
    ]

    if summary.recent_orders:
        for order in summary.recent_orders:
            number = order.order_number or order.id
            lines.append(
                f"- #{number} {order.customer_name or '—'} [{order.status}] "
                f"{order.created_at.strftime('%Y-%m-%d')} {format_currency(order.total)}"
            )
    else:
        lines.append("- No orders yet")

    lines += ["", "**Low Stock Alert:**"]
    if summary.low_stock_products:
        for product in summary.low_stock_products:
            lines.append(
                f"- {product.name} (SKU: {product.sku}) {product.current_stock} / "
                f"{product.reorder_level} min [{stock_status(product)}]"
            )
    else:
        lines.append("- All items are well stocked")

    return "\n".join(lines) + "\n"
