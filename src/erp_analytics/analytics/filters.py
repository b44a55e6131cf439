"""Search and filter helpers for product, order and supplier tables."""

from collections.abc import Sequence

from erp_analytics.data.models import Order, Product, Supplier
from erp_analytics.utils import matches_term

ALL = "all"


def search_products(products: Sequence[Product], term: str = "", category: str = ALL) -> list[Product]:
    """
    Filter products by name/SKU search term and category.

    Args:
        products: Products to filter
        term: Case-insensitive substring matched against name and SKU
        category: Exact category, or "all"

    Returns:
        Matching products in input order
    """
    return [
        p
        for p in products
        if matches_term(term, p.name, p.sku) and (category == ALL or p.category == category)
    ]


def search_orders(orders: Sequence[Order], term: str = "", status: str = ALL) -> list[Order]:
    """
    Filter orders by customer/id search term and status.

    Args:
        orders: Orders to filter
        term: Case-insensitive substring matched against customer name, customer email and order id
        status: Exact status, or "all"

    Returns:
        Matching orders in input order
    """
    return [
        o
        for o in orders
        if matches_term(term, o.customer_name, o.customer_email, o.id) and (status == ALL or o.status == status)
    ]


def search_suppliers(suppliers: Sequence[Supplier], term: str = "", status: str = ALL) -> list[Supplier]:
    """Filter suppliers by name/contact/email search term and status."""
    return [
        s
        for s in suppliers
        if matches_term(term, s.name, s.contact_person, s.email) and (status == ALL or s.status == status)
    ]


def list_categories(products: Sequence[Product]) -> list[str]:
    """Distinct product categories in first-seen order."""
    return list(dict.fromkeys(p.category for p in products))
