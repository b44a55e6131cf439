"""Read-only data store backed by JSON files."""

import asyncio
import json
import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from erp_analytics.data.models import Order, Product, Supplier
from erp_analytics.exceptions import DataStoreError
from erp_analytics.store.base import DataStore, scope_to_account

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

PRODUCTS_FILE = "products.json"
ORDERS_FILE = "orders.json"
SUPPLIERS_FILE = "suppliers.json"


class JsonDataStore(DataStore):
    """
    Data store reading one JSON array per record type from a directory.

    Files are re-read on every call so the latest export is always used.
    A missing file is treated as an empty collection.
    """

    def __init__(self, data_dir: Path | str):
        """
        Initialize JSON data store.

        Args:
            data_dir: Directory containing products.json, orders.json and suppliers.json
        """
        self.data_dir = Path(data_dir)

    async def list_products(self, account_id: str | None = None) -> list[Product]:
        products = await self._load(PRODUCTS_FILE, Product)
        return scope_to_account(products, account_id)

    async def list_orders(self, account_id: str | None = None) -> list[Order]:
        orders = await self._load(ORDERS_FILE, Order)
        return scope_to_account(orders, account_id)

    async def list_suppliers(self, account_id: str | None = None) -> list[Supplier]:
        suppliers = await self._load(SUPPLIERS_FILE, Supplier)
        return scope_to_account(suppliers, account_id)

    async def _load(self, filename: str, model: type[RecordT]) -> list[RecordT]:
        return await asyncio.to_thread(self._read_records, self.data_dir / filename, model)

    def _read_records(self, path: Path, model: type[RecordT]) -> list[RecordT]:
        """
        Read and validate records from a JSON file.

        Args:
            path: JSON file holding an array of records
            model: Pydantic model to validate each record against

        Returns:
            List of validated records

        Raises:
            DataStoreError: If the file cannot be read, parsed or validated
        """
        if not path.exists():
            logger.warning(f"Data file not found, using empty list: {path}")
            return []

        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Error reading {path}: {e}")
            raise DataStoreError(f"Could not read {path}: {e}") from e

        try:
            records = TypeAdapter(list[model]).validate_python(raw)
        except ValidationError as e:
            logger.error(f"Invalid records in {path}: {e.error_count()} errors")
            raise DataStoreError(f"Invalid records in {path}: {e}") from e

        logger.info(f"Loaded {len(records)} {model.__name__} records from {path}")
        return records
