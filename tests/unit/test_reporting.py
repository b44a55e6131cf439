"""Unit tests for text reporting."""

from datetime import timedelta

import pytest

from erp_analytics.analytics.aggregator import compute_analytics
from erp_analytics.analytics.dashboard import build_dashboard
from erp_analytics.analytics.schemas import DistributionBucket
from erp_analytics.reporting import (
    create_dashboard_summary,
    create_metrics_summary,
    format_currency,
    format_distribution,
    format_top_products,
)


class TestFormatting:
    """Test small formatting helpers."""

    def test_format_currency(self):
        """Test thousands separators and two decimals."""
        assert format_currency(1234567.891) == "$1,234,567.89"
        assert format_currency(0) == "$0.00"

    def test_format_distribution(self):
        """Test share percentages."""
        rows = format_distribution([DistributionBucket(name="Pending", value=1), DistributionBucket(name="Delivered", value=3)])

        assert rows == [["Pending", "1", "25.0%"], ["Delivered", "3", "75.0%"]]

    def test_format_distribution_empty(self):
        """Test placeholder row for no data."""
        assert format_distribution([]) == [["No data", "", ""]]


class TestSummaries:
    """Test full text summaries."""

    def test_metrics_summary(self, sample_products, make_order, now):
        """Test that headline figures appear in the analytics summary."""
        orders = [
            make_order(total=1200.0, created_at=now - timedelta(days=1)),
            make_order(total=300.0, status="pending", created_at=now),
        ]
        report = compute_analytics(sample_products, orders, 30, now=now)

        text = create_metrics_summary(report)

        assert "Last 30 days" in text
        assert "Total Revenue: $1,500.00" in text
        assert "Avg Order Value: $750.00" in text
        assert "Best Day: Jun 14 ($1,200.00)" in text
        assert "Low Stock Items: 2" in text
        assert "Laptop" in text
        assert "Low Stock Alert: You have 2 products running low on stock." in text
        assert "Revenue Opportunity: Your average order value is $750.00." in text

    def test_top_products_rows(self, sample_products, now):
        """Test ranked rows."""
        report = compute_analytics(sample_products, [], 7, now=now)

        rows = format_top_products(report)

        assert rows[0] == ["1", "Laptop", "Electronics", "3", "$3,000.00"]

    def test_metrics_summary_without_orders(self, now):
        """Test that an empty report still renders."""
        text = create_metrics_summary(compute_analytics([], [], 7, now=now))

        assert "Best Day: —" in text
        assert "No products" in text
        assert "No insights for this period" in text

    def test_dashboard_summary(self, sample_products, sample_suppliers, make_order):
        """Test recent orders and low-stock lines."""
        summary = build_dashboard(sample_products, [make_order(order_number="SO-1001")], sample_suppliers)

        text = create_dashboard_summary(summary)

        assert "#SO-1001 Jane Doe [delivered]" in text
        assert "Coffee Beans (SKU: SKU-3) 0 / 10 min [Out of Stock]" in text

    def test_dashboard_summary_empty(self):
        """Test placeholder lines for an empty snapshot."""
        text = create_dashboard_summary(build_dashboard([], [], []))

        assert "No orders yet" in text
        assert "All items are well stocked" in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
