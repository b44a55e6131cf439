#!/usr/bin/env python3
"""Generate sample data for the ERP analytics."""

import json
import logging
from pathlib import Path

from erp_analytics.analytics import compute_stock_alerts, list_categories
from erp_analytics.config.settings import get_settings
from erp_analytics.data import SampleDataGenerator
from erp_analytics.data.models import Order, Product, Supplier
from erp_analytics.store.json_store import ORDERS_FILE, PRODUCTS_FILE, SUPPLIERS_FILE

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _write_records(path: Path, records: list) -> None:
    logger.info(f"Saving {len(records)} records to {path}...")
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump([r.model_dump(mode="json") for r in records], f, indent=2)
    except OSError as e:
        logger.error(f"Failed to save {path}: {e}")
        raise


def generate_and_save_sample_data(
    products_count: int | None = None,
    orders_count: int | None = None,
    suppliers_count: int | None = None,
    days: int | None = None,
    save_to_disk: bool = True,
    data_dir: Path | None = None,
    user_id: str | None = None,
) -> tuple[list[Product], list[Order], list[Supplier]]:
    """
    Generate sample suppliers, products and orders.

    Args:
        products_count: Number of products (defaults to settings.sample_data_products_count)
        orders_count: Number of orders (defaults to settings.sample_data_orders_count)
        suppliers_count: Number of suppliers (defaults to settings.sample_data_suppliers_count)
        days: Days of order history (defaults to settings.sample_data_days)
        save_to_disk: Whether to save JSON files to disk (default: True)
        data_dir: Directory to save files (defaults to settings.data_dir)
        user_id: Account that owns the generated records (defaults to settings.account_id)

    Returns:
        Tuple of (products, orders, suppliers)

    Raises:
        OSError: If save_to_disk=True and file writing fails
    """
    settings = get_settings()

    products_count = products_count if products_count is not None else settings.sample_data_products_count
    orders_count = orders_count if orders_count is not None else settings.sample_data_orders_count
    suppliers_count = suppliers_count if suppliers_count is not None else settings.sample_data_suppliers_count
    days = days if days is not None else settings.sample_data_days
    data_dir = data_dir if data_dir is not None else settings.data_dir
    user_id = user_id if user_id is not None else settings.account_id

    logger.info("Initializing sample data generator...")
    generator = SampleDataGenerator(seed=42, user_id=user_id)

    logger.info(f"Generating {suppliers_count} suppliers...")
    suppliers = generator.generate_suppliers(count=suppliers_count)

    logger.info(f"Generating {products_count} products...")
    products = generator.generate_products(count=products_count, suppliers=suppliers)

    logger.info(f"Generating {orders_count} orders over {days} days...")
    orders = generator.generate_orders(products, count=orders_count, days=days, suppliers=suppliers)

    if save_to_disk:
        data_dir.mkdir(parents=True, exist_ok=True)
        _write_records(data_dir / SUPPLIERS_FILE, suppliers)
        _write_records(data_dir / PRODUCTS_FILE, products)
        _write_records(data_dir / ORDERS_FILE, orders)

    return products, orders, suppliers


def main():
    """Generate and save sample data with summary output."""
    try:
        products, orders, suppliers = generate_and_save_sample_data()

        print("\n" + "=" * 60)
        print("SAMPLE DATA GENERATION SUMMARY")
        print("=" * 60)
        print(f"Total Suppliers: {len(suppliers)}")
        print(f"Total Products: {len(products)}")
        print(f"Total Orders: {len(orders)}")

        print("\nProducts by Category:")
        for category in sorted(list_categories(products)):
            print(f"  {category}: {sum(1 for p in products if p.category == category)}")

        low_stock, out_of_stock = compute_stock_alerts(products)
        print("\nStock Alerts:")
        print(f"  Low Stock (incl. out of stock): {low_stock}")
        print(f"  Out of Stock: {out_of_stock}")

        print("\nOrders by Status:")
        status_counts: dict[str, int] = {}
        for order in orders:
            status_counts[order.status] = status_counts.get(order.status, 0) + 1
        for status, count in sorted(status_counts.items()):
            print(f"  {status.capitalize()}: {count}")

        print(f"\nFiles saved to: {get_settings().data_dir}")
        print("=" * 60)

    except Exception as e:
        logger.error(f"Failed to generate sample data: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
