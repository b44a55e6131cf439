"""JSON export of analytics results and full-data backups."""

import json
import logging
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from erp_analytics.analytics.schemas import AnalyticsReport
from erp_analytics.data.models import Order, Product, Supplier
from erp_analytics.exceptions import InvalidBackupError
from erp_analytics.utils import local_now

logger = logging.getLogger(__name__)

BACKUP_VERSION = "1.0"
ANALYTICS_EXPORT_PREFIX = "erp-analytics"
BACKUP_EXPORT_PREFIX = "erp-data-backup"


class BackupDocument(BaseModel):
    """Portable copy of all records for one account."""

    products: list[Product]
    orders: list[Order]
    suppliers: list[Supplier]
    export_date: datetime
    version: str = Field(default=BACKUP_VERSION)


def build_analytics_export(report: AnalyticsReport, exported_at: datetime | None = None) -> dict[str, Any]:
    """
    Build the analytics export document.

    Args:
        report: Computed analytics report
        exported_at: Export timestamp (defaults to now)

    Returns:
        JSON-compatible dictionary with metrics, series, distributions and export date
    """
    data = report.model_dump(
        mode="json",
        include={"metrics", "revenue_trend", "order_status", "top_products", "categories"},
    )
    data["window_days"] = report.window_days
    data["export_date"] = (exported_at or local_now()).isoformat()
    return data


def dump_analytics_export(report: AnalyticsReport, exported_at: datetime | None = None) -> str:
    """Serialize the analytics export document as indented JSON."""
    return json.dumps(build_analytics_export(report, exported_at), indent=2)


def export_filename(prefix: str = ANALYTICS_EXPORT_PREFIX, when: date | datetime | None = None) -> str:
    """
    Build a dated download filename.

    Args:
        prefix: Filename prefix
        when: Date to stamp (defaults to today)

    Returns:
        Filename such as "erp-analytics-2024-01-15.json"
    """
    when = when or local_now()
    day = when.date() if isinstance(when, datetime) else when
    return f"{prefix}-{day.isoformat()}.json"


def build_backup(
    products: list[Product],
    orders: list[Order],
    suppliers: list[Supplier],
    exported_at: datetime | None = None,
) -> BackupDocument:
    """
    Bundle all records into a backup document.

    Args:
        products: Products to include
        orders: Orders to include
        suppliers: Suppliers to include
        exported_at: Export timestamp (defaults to now)

    Returns:
        BackupDocument
    """
    return BackupDocument(
        products=list(products),
        orders=list(orders),
        suppliers=list(suppliers),
        export_date=exported_at or local_now(),
    )


def dump_backup(backup: BackupDocument) -> str:
    """Serialize a backup document as indented JSON."""
    return backup.model_dump_json(indent=2)


def parse_backup(text: str | bytes) -> BackupDocument:
    """
    Parse and validate a backup document.

    Args:
        text: JSON text produced by dump_backup

    Returns:
        Validated BackupDocument

    Raises:
        InvalidBackupError: If the text is not valid JSON, lacks products,
            orders or suppliers, or contains invalid records
    """
    try:
        raw = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidBackupError(f"Backup is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise InvalidBackupError("Invalid data format: expected a JSON object")

    missing = [key for key in ("products", "orders", "suppliers") if key not in raw]
    if missing:
        raise InvalidBackupError(f"Invalid data format: missing {', '.join(missing)}")

    raw.setdefault("export_date", local_now().isoformat())

    try:
        backup = BackupDocument.model_validate(raw)
    except ValidationError as e:
        logger.error(f"Backup validation failed with {e.error_count()} errors")
        raise InvalidBackupError(f"Invalid records in backup: {e}") from e

    if backup.version != BACKUP_VERSION:
        logger.warning(f"Backup version {backup.version} differs from supported version {BACKUP_VERSION}")

    logger.info(
        f"Parsed backup with {len(backup.products)} products, "
        f"{len(backup.orders)} orders, {len(backup.suppliers)} suppliers"
    )
    return backup
