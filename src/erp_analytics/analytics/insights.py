"""Business insights derived from an analytics report."""

from erp_analytics.analytics.schemas import AnalyticsReport, Insight


def build_insights(report: AnalyticsReport) -> tuple[Insight, ...]:
    """
    Derive recommendations from report metrics.

    A low-stock alert is raised when any product is at or below its
    reorder level, a revenue note when the average order value is
    positive, and a top-performer note when at least one product is ranked.

    Args:
        report: Analytics report for a window

    Returns:
        Insights in display order (empty when none apply)
    """
    m = report.metrics
    insights = []

    if m.low_stock_items > 0:
        insights.append(
            Insight(
                kind="low_stock",
                title="Low Stock Alert",
                message=(
                    f"You have {m.low_stock_items} products running low on stock. "
                    "Consider reordering to avoid stockouts."
                ),
            )
        )

    if m.average_order_value > 0:
        insights.append(
            Insight(
                kind="revenue_opportunity",
                title="Revenue Opportunity",
                message=(
                    f"Your average order value is ${m.average_order_value:.2f}. "
                    "Consider bundling products or offering upsells to increase this metric."
                ),
            )
        )

    if report.top_products:
        insights.append(
            Insight(
                kind="top_performer",
                title="Top Performer",
                message=(
                    f'"{report.top_products[0].name}" is your highest-value product. '
                    "Consider promoting similar items or increasing its stock levels."
                ),
            )
        )

    return tuple(insights)
