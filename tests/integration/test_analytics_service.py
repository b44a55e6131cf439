"""Integration tests for the analytics service over real stores."""

import json
from datetime import datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from erp_analytics.config.settings import Settings
from erp_analytics.exceptions import DataStoreError, InvalidParameterError
from erp_analytics.export import parse_backup
from erp_analytics.service import AnalyticsService
from erp_analytics.store import JsonDataStore, MemoryDataStore


@pytest.fixture
def settings():
    return Settings(_env_file=None, default_window_days=30, top_products_limit=3, recent_items_limit=2)


@pytest.fixture
def recent_orders(make_order):
    # Relative to the real clock, since the service always aggregates "now"
    today = datetime.now().replace(hour=12, minute=0, second=0, microsecond=0)
    return [
        make_order(id="o1", total=100.0, created_at=today, user_id="acct"),
        make_order(id="o2", total=40.0, status="pending", created_at=today - timedelta(days=2), user_id="acct"),
        make_order(id="o3", total=500.0, status="cancelled", created_at=today - timedelta(days=3), user_id="acct"),
        make_order(id="o4", total=900.0, created_at=today - timedelta(days=60), user_id="acct"),
        make_order(id="o5", total=70.0, created_at=today, user_id="other"),
    ]


class TestAnalyticsService:
    """Test the async service end to end."""

    @pytest.mark.asyncio
    async def test_get_analytics_default_window(self, settings, sample_products, recent_orders):
        """Test that the default window comes from settings."""
        service = AnalyticsService(MemoryDataStore(sample_products, recent_orders), settings)

        report = await service.get_analytics()

        assert report.window_days == 30
        assert len(report.revenue_trend) == 30
        assert report.metrics.total_orders == 4
        assert report.metrics.total_revenue == pytest.approx(210.0)
        assert len(report.top_products) == 3

    @pytest.mark.asyncio
    async def test_account_scope(self, settings, sample_products, recent_orders):
        """Test that only the account's orders are aggregated."""
        service = AnalyticsService(MemoryDataStore(sample_products, recent_orders), settings)

        report = await service.get_analytics(days=90, account_id="acct")

        assert report.metrics.total_orders == 4
        assert report.metrics.total_revenue == pytest.approx(1040.0)
        assert report.metrics.total_products == 0

    @pytest.mark.asyncio
    async def test_invalid_window_skips_store(self, settings):
        """Test that an invalid window is rejected before any fetch."""
        store = AsyncMock()

        with pytest.raises(InvalidParameterError):
            await AnalyticsService(store, settings).get_analytics(days=60)

        store.list_products.assert_not_called()
        store.list_orders.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, settings, tmp_path):
        """Test that store failures surface unchanged."""
        (tmp_path / "products.json").write_text("not json", encoding="utf-8")
        service = AnalyticsService(JsonDataStore(tmp_path), settings)

        with pytest.raises(DataStoreError):
            await service.get_analytics()

    @pytest.mark.asyncio
    async def test_get_dashboard(self, settings, sample_products, sample_suppliers, recent_orders):
        """Test the dashboard payload with the configured list limit."""
        service = AnalyticsService(MemoryDataStore(sample_products, recent_orders, sample_suppliers), settings)

        summary = await service.get_dashboard()

        assert summary.stats.total_orders == 5
        assert summary.stats.total_suppliers == 3
        assert len(summary.recent_orders) == 2
        assert {o.id for o in summary.recent_orders} == {"o1", "o5"}

    @pytest.mark.asyncio
    async def test_export_analytics(self, settings, sample_products, recent_orders):
        """Test that the export is JSON with the expected window."""
        service = AnalyticsService(MemoryDataStore(sample_products, recent_orders), settings)

        data = json.loads(await service.export_analytics(days=7))

        assert data["window_days"] == 7
        assert len(data["revenue_trend"]) == 7
        assert "export_date" in data

    @pytest.mark.asyncio
    async def test_export_backup_round_trip(self, settings, sample_products, sample_suppliers, recent_orders):
        """Test that a backup export parses back to the stored records."""
        service = AnalyticsService(MemoryDataStore(sample_products, recent_orders, sample_suppliers), settings)

        backup = parse_backup(await service.export_backup())

        assert backup.products == sample_products
        assert [o.id for o in backup.orders] == [o.id for o in recent_orders]
        assert backup.suppliers == sample_suppliers


class TestJsonStoreService:
    """Test the service over files written by the sample generator."""

    @pytest.mark.asyncio
    async def test_generated_data(self, settings, tmp_path):
        """Test analytics over a freshly generated data directory."""
        from erp_analytics.data import SampleDataGenerator

        gen = SampleDataGenerator(seed=7)
        suppliers = gen.generate_suppliers(count=5)
        products = gen.generate_products(count=30, suppliers=suppliers)
        orders = gen.generate_orders(products, count=200, days=90, suppliers=suppliers)
        for name, records in (("products", products), ("orders", orders), ("suppliers", suppliers)):
            (tmp_path / f"{name}.json").write_text(
                json.dumps([r.model_dump(mode="json") for r in records]), encoding="utf-8"
            )

        service = AnalyticsService(JsonDataStore(tmp_path), settings)
        report = await service.get_analytics(days=365)

        assert report.metrics.total_orders == 200
        assert report.metrics.total_products == 30
        assert sum(b.value for b in report.order_status) == 200
        assert sum(b.value for b in report.categories) == 30
        assert sum(p.orders for p in report.revenue_trend) == sum(
            1 for o in orders if o.type == "sales" and o.status != "cancelled"
        )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
