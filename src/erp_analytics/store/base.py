"""Abstract data store interface."""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from erp_analytics.data.models import Order, Product, Supplier

logger = logging.getLogger(__name__)


class DataStore(ABC):
    """Abstract base class for record sources feeding the analytics."""

    @abstractmethod
    async def list_products(self, account_id: str | None = None) -> list[Product]:
        """
        List products.

        Args:
            account_id: Only return products owned by this account (optional)

        Returns:
            List of Product records
        """
        pass

    @abstractmethod
    async def list_orders(self, account_id: str | None = None) -> list[Order]:
        """
        List orders.

        Args:
            account_id: Only return orders owned by this account (optional)

        Returns:
            List of Order records
        """
        pass

    @abstractmethod
    async def list_suppliers(self, account_id: str | None = None) -> list[Supplier]:
        """
        List suppliers.

        Args:
            account_id: Only return suppliers owned by this account (optional)

        Returns:
            List of Supplier records
        """
        pass


@dataclass(frozen=True)
class Snapshot:
    """Point-in-time copy of all records used for one aggregation pass."""

    products: tuple[Product, ...]
    orders: tuple[Order, ...]
    suppliers: tuple[Supplier, ...]


def scope_to_account(records: list, account_id: str | None) -> list:
    """Keep records owned by ``account_id``; all records when it is None."""
    if account_id is None:
        return list(records)
    return [r for r in records if r.user_id == account_id]


async def load_snapshot(store: DataStore, account_id: str | None = None) -> Snapshot:
    """
    Fetch products, orders and suppliers concurrently into one snapshot.

    Args:
        store: Data store to read from
        account_id: Account scope (optional)

    Returns:
        Snapshot holding immutable tuples of each record type
    """
    products, orders, suppliers = await asyncio.gather(
        store.list_products(account_id),
        store.list_orders(account_id),
        store.list_suppliers(account_id),
    )
    logger.debug(f"Loaded snapshot: {len(products)} products, {len(orders)} orders, {len(suppliers)} suppliers")
    return Snapshot(products=tuple(products), orders=tuple(orders), suppliers=tuple(suppliers))
