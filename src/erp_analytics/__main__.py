"""Command-line entry point for ERP analytics."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from erp_analytics.analytics.aggregator import ALLOWED_WINDOWS
from erp_analytics.config.deployment import configure_logging, get_data_store
from erp_analytics.config.settings import get_settings
from erp_analytics.exceptions import DataStoreError, InvalidBackupError, InvalidParameterError
from erp_analytics.export import parse_backup
from erp_analytics.observability import flush_langfuse
from erp_analytics.reporting import create_dashboard_summary, create_metrics_summary
from erp_analytics.service import AnalyticsService
from erp_analytics.store import MemoryDataStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="erp-analytics",
        description="Inventory and order analytics over exported ERP data.",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help=f"Analytics window in days, one of {sorted(ALLOWED_WINDOWS)} (default: from settings)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--data-dir", type=Path, default=None, help="Directory holding the JSON data files")
    source.add_argument(
        "--from-backup",
        type=Path,
        default=None,
        metavar="FILE",
        help="Analyze the records in a backup file instead of the configured data store",
    )
    parser.add_argument("--account", default=None, help="Only include records owned by this account")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--dashboard", action="store_true", help="Show the dashboard summary instead of analytics")
    mode.add_argument("--json", action="store_true", help="Print the analytics export document as JSON")
    mode.add_argument("--backup", action="store_true", help="Print a full data backup as JSON")
    return parser


def load_backup_store(path: Path) -> MemoryDataStore:
    """
    Build an in-memory store from a backup file.

    Args:
        path: Backup JSON written by --backup

    Returns:
        MemoryDataStore holding the backed-up records

    Raises:
        DataStoreError: If the file cannot be read
        InvalidBackupError: If the file is not a valid backup
    """
    try:
        text = path.read_bytes()
    except OSError as e:
        raise DataStoreError(f"Could not read backup {path}: {e}") from e

    backup = parse_backup(text)
    return MemoryDataStore(backup.products, backup.orders, backup.suppliers)


async def run(args: argparse.Namespace) -> str:
    """
    Execute the requested command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Text to print
    """
    settings = get_settings()
    if args.data_dir is not None:
        settings = settings.model_copy(update={"data_dir": args.data_dir, "data_backend": "json"})

    if args.from_backup is not None:
        store = load_backup_store(args.from_backup)
    else:
        store = get_data_store(settings)

    service = AnalyticsService(store, settings)

    if args.dashboard:
        return create_dashboard_summary(await service.get_dashboard(args.account))
    if args.json:
        return await service.export_analytics(args.days, args.account)
    if args.backup:
        return await service.export_backup(args.account)
    return create_metrics_summary(await service.get_analytics(args.days, args.account))


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        output = asyncio.run(run(args))
    except InvalidParameterError as e:
        logger.error(str(e))
        return 2
    except DataStoreError as e:
        logger.error(f"Failed to load data: {e}")
        return 1
    except InvalidBackupError as e:
        logger.error(f"Invalid backup file: {e}")
        return 1
    finally:
        flush_langfuse()

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
