"""In-memory data store."""

import logging
from collections.abc import Iterable

from erp_analytics.data.models import Order, Product, Supplier
from erp_analytics.store.base import DataStore, scope_to_account

logger = logging.getLogger(__name__)


class MemoryDataStore(DataStore):
    """
    In-memory record store.

    Used in tests and for data loaded by other means (e.g. a parsed backup).
    Listing returns new lists, so callers cannot alter the stored records.
    """

    def __init__(
        self,
        products: Iterable[Product] = (),
        orders: Iterable[Order] = (),
        suppliers: Iterable[Supplier] = (),
    ):
        """
        Initialize in-memory storage.

        Args:
            products: Initial products
            orders: Initial orders
            suppliers: Initial suppliers
        """
        self._products: list[Product] = list(products)
        self._orders: list[Order] = list(orders)
        self._suppliers: list[Supplier] = list(suppliers)
        logger.info(
            f"Initialized in-memory data store with {len(self._products)} products, "
            f"{len(self._orders)} orders, {len(self._suppliers)} suppliers"
        )

    async def list_products(self, account_id: str | None = None) -> list[Product]:
        return scope_to_account(self._products, account_id)

    async def list_orders(self, account_id: str | None = None) -> list[Order]:
        return scope_to_account(self._orders, account_id)

    async def list_suppliers(self, account_id: str | None = None) -> list[Supplier]:
        return scope_to_account(self._suppliers, account_id)
