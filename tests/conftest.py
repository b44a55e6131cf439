"""Shared fixtures and record factories."""

from datetime import datetime

import pytest

from erp_analytics.data.models import Order, Product, Supplier

# Midday reference time, far from any midnight or DST boundary
NOW = datetime(2024, 6, 15, 12, 0, 0)


def _make_product(**overrides) -> Product:
    fields = {
        "id": "prod_1",
        "name": "Wireless Mouse",
        "sku": "SKU-10001",
        "category": "Electronics",
        "price": 10.0,
        "cost": 4.0,
        "current_stock": 5,
        "reorder_level": 10,
    }
    fields.update(overrides)
    return Product(**fields)


def _make_order(**overrides) -> Order:
    fields = {
        "id": "ord_1",
        "type": "sales",
        "status": "delivered",
        "total": 50.0,
        "created_at": NOW,
        "customer_name": "Jane Doe",
        "customer_email": "jane@example.com",
    }
    fields.update(overrides)
    return Order(**fields)


def _make_supplier(**overrides) -> Supplier:
    fields = {
        "id": "sup_1",
        "name": "Tech Supplies Inc.",
        "contact_person": "Sam Lee",
        "email": "sales@techsupplies.example",
        "status": "active",
    }
    fields.update(overrides)
    return Supplier(**fields)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_product():
    return _make_product


@pytest.fixture
def make_order():
    return _make_order


@pytest.fixture
def make_supplier():
    return _make_supplier


@pytest.fixture
def sample_products() -> list[Product]:
    return [
        _make_product(id="p1", name="Laptop", sku="SKU-1", category="Electronics", price=1000.0, cost=700.0,
                     current_stock=3, reorder_level=5),
        _make_product(id="p2", name="Mouse", sku="SKU-2", category="Electronics", price=20.0, cost=8.0,
                     current_stock=100, reorder_level=20),
        _make_product(id="p3", name="Coffee Beans", sku="SKU-3", category="Groceries", price=12.5, cost=6.0,
                     current_stock=0, reorder_level=10),
        _make_product(id="p4", name="Desk Lamp", sku="SKU-4", category="Office Supplies", price=45.0, cost=20.0,
                     current_stock=40, reorder_level=10),
    ]


@pytest.fixture
def sample_suppliers() -> list[Supplier]:
    return [
        _make_supplier(id="s1", name="Tech Supplies Inc."),
        _make_supplier(id="s2", name="Bean Traders", contact_person="Ana Ruiz", email="ana@beans.example"),
        _make_supplier(id="s3", name="Old Vendor", status="inactive", contact_person=None, email=None),
    ]
