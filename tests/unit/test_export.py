"""Unit tests for analytics export and data backups."""

import json
from datetime import date, datetime

import pytest

from erp_analytics.analytics.aggregator import compute_analytics
from erp_analytics.exceptions import InvalidBackupError
from erp_analytics.export import (
    BACKUP_VERSION,
    build_analytics_export,
    build_backup,
    dump_analytics_export,
    dump_backup,
    export_filename,
    parse_backup,
)


@pytest.fixture
def report(sample_products, make_order, now):
    return compute_analytics(sample_products, [make_order(total=50.0, created_at=now)], 7, now=now)


class TestAnalyticsExport:
    """Test the analytics export document."""

    def test_document_sections(self, report):
        """Test that every section and the export date are present."""
        exported_at = datetime(2024, 6, 15, 13, 0, 0)

        data = build_analytics_export(report, exported_at)

        assert set(data) == {
            "metrics",
            "revenue_trend",
            "order_status",
            "top_products",
            "categories",
            "window_days",
            "export_date",
        }
        assert data["export_date"] == "2024-06-15T13:00:00"
        assert data["metrics"]["total_revenue"] == 50.0
        assert len(data["revenue_trend"]) == 7
        assert data["revenue_trend"][-1]["date"] == "2024-06-15"
        assert data["top_products"][0]["name"] == "Laptop"

    def test_dump_is_indented_json(self, report):
        """Test that the dumped text parses back to the same document."""
        exported_at = datetime(2024, 6, 15, 13, 0, 0)

        text = dump_analytics_export(report, exported_at)

        assert text.startswith("{\n  ")
        assert json.loads(text) == build_analytics_export(report, exported_at)


class TestExportFilename:
    """Test dated download filenames."""

    def test_analytics_filename(self):
        """Test the default analytics prefix."""
        assert export_filename(when=date(2024, 1, 15)) == "erp-analytics-2024-01-15.json"

    def test_datetime_and_prefix(self):
        """Test a custom prefix with a datetime stamp."""
        assert export_filename("erp-data-backup", datetime(2024, 3, 2, 23, 59)) == "erp-data-backup-2024-03-02.json"


class TestBackup:
    """Test backup build and parse."""

    def test_round_trip(self, sample_products, sample_suppliers, make_order):
        """Test that a dumped backup parses back to the same records."""
        orders = [make_order(id="o1"), make_order(id="o2", status="pending")]
        backup = build_backup(sample_products, orders, sample_suppliers, exported_at=datetime(2024, 6, 15, 12, 0))

        parsed = parse_backup(dump_backup(backup))

        assert parsed.version == BACKUP_VERSION
        assert parsed.products == sample_products
        assert parsed.orders == orders
        assert parsed.suppliers == sample_suppliers

    def test_missing_section_rejected(self):
        """Test that documents lacking a record type are rejected."""
        with pytest.raises(InvalidBackupError, match="missing suppliers"):
            parse_backup(json.dumps({"products": [], "orders": []}))

    def test_malformed_json_rejected(self):
        """Test that non-JSON text is rejected."""
        with pytest.raises(InvalidBackupError, match="not valid JSON"):
            parse_backup("{not json")

    def test_invalid_utf8_bytes_rejected(self):
        """Test that undecodable bytes are rejected like malformed JSON."""
        with pytest.raises(InvalidBackupError, match="not valid JSON"):
            parse_backup(b'{"products": [], "orders": [], "suppliers": [], "x": "\xff"}')

    def test_non_object_rejected(self):
        """Test that a top-level array is rejected."""
        with pytest.raises(InvalidBackupError, match="expected a JSON object"):
            parse_backup("[]")

    def test_invalid_record_rejected(self):
        """Test that invalid records inside a backup are rejected."""
        text = json.dumps({"products": [{"id": "p1"}], "orders": [], "suppliers": []})

        with pytest.raises(InvalidBackupError, match="Invalid records"):
            parse_backup(text)

    def test_export_date_optional(self):
        """Test that older backups without an export date still parse."""
        backup = parse_backup(json.dumps({"products": [], "orders": [], "suppliers": []}))

        assert backup.products == []
        assert backup.export_date is not None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
