"""Async orchestration: load a snapshot from the store, then aggregate."""

import logging

from erp_analytics.analytics.aggregator import compute_analytics, validate_window
from erp_analytics.analytics.dashboard import build_dashboard
from erp_analytics.analytics.schemas import AnalyticsReport, DashboardSummary
from erp_analytics.config.settings import Settings, get_settings
from erp_analytics.export import build_backup, dump_analytics_export, dump_backup
from erp_analytics.observability import log_export_event, trace
from erp_analytics.store.base import DataStore, load_snapshot

logger = logging.getLogger(__name__)


class AnalyticsService:
    """
    Analytics entry point for the presentation layer.

    Each call fetches a fresh snapshot from the store and runs the pure
    aggregation over it. Store errors are logged and re-raised.
    """

    def __init__(self, store: DataStore, settings: Settings | None = None):
        """
        Initialize analytics service.

        Args:
            store: Record source
            settings: Optional Settings instance. If None, will use get_settings().
        """
        self.store = store
        self.settings = settings or get_settings()

    def _account(self, account_id: str | None) -> str | None:
        return account_id if account_id is not None else self.settings.account_id

    @trace(name="analytics_report", trace_type="aggregation")
    async def get_analytics(self, days: int | None = None, account_id: str | None = None) -> AnalyticsReport:
        """
        Compute the analytics report for a window.

        Args:
            days: Window size (defaults to settings.default_window_days)
            account_id: Account scope (defaults to settings.account_id)

        Returns:
            AnalyticsReport

        Raises:
            InvalidParameterError: If days is not a supported window
            DataStoreError: If the store cannot load records
        """
        days = validate_window(self.settings.default_window_days if days is None else days)
        account_id = self._account(account_id)

        try:
            snapshot = await load_snapshot(self.store, account_id)
        except Exception as e:
            logger.error(f"Error loading analytics data: {e}")
            raise

        report = compute_analytics(
            snapshot.products,
            snapshot.orders,
            days,
            top_limit=self.settings.top_products_limit,
        )
        logger.info(
            f"Computed {days}-day analytics: revenue={report.metrics.total_revenue:.2f}, "
            f"orders={report.metrics.total_orders}"
        )
        return report

    @trace(name="dashboard_summary", trace_type="aggregation")
    async def get_dashboard(self, account_id: str | None = None) -> DashboardSummary:
        """
        Compute the dashboard page payload.

        Args:
            account_id: Account scope (defaults to settings.account_id)

        Returns:
            DashboardSummary
        """
        try:
            snapshot = await load_snapshot(self.store, self._account(account_id))
        except Exception as e:
            logger.error(f"Error loading dashboard data: {e}")
            raise

        return build_dashboard(
            snapshot.products,
            snapshot.orders,
            snapshot.suppliers,
            limit=self.settings.recent_items_limit,
        )

    @trace(name="analytics_export", trace_type="export")
    async def export_analytics(self, days: int | None = None, account_id: str | None = None) -> str:
        """
        Compute the analytics report and serialize it as JSON.

        Args:
            days: Window size (defaults to settings.default_window_days)
            account_id: Account scope (defaults to settings.account_id)

        Returns:
            JSON text of the analytics export document
        """
        report = await self.get_analytics(days, account_id)
        log_export_event("analytics", window_days=report.window_days, account_id=self._account(account_id))
        return dump_analytics_export(report)

    @trace(name="data_backup", trace_type="export")
    async def export_backup(self, account_id: str | None = None) -> str:
        """
        Serialize all records for an account as a backup document.

        Args:
            account_id: Account scope (defaults to settings.account_id)

        Returns:
            JSON text of the backup document
        """
        account_id = self._account(account_id)
        snapshot = await load_snapshot(self.store, account_id)
        backup = build_backup(list(snapshot.products), list(snapshot.orders), list(snapshot.suppliers))
        log_export_event(
            "data_backup",
            account_id=account_id,
            record_counts={
                "products": len(snapshot.products),
                "orders": len(snapshot.orders),
                "suppliers": len(snapshot.suppliers),
            },
        )
        return dump_backup(backup)
