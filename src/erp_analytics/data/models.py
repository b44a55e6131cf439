"""Pydantic models for ERP inventory, order and supplier records."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

OrderType = Literal["sales", "purchase"]
OrderStatus = Literal["pending", "confirmed", "processing", "shipped", "delivered", "cancelled"]
SupplierStatus = Literal["active", "inactive"]

ORDER_STATUSES: tuple[str, ...] = ("pending", "confirmed", "processing", "shipped", "delivered", "cancelled")


class Product(BaseModel):
    """Product catalog record."""

    id: str = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    sku: str = Field(..., description="Stock Keeping Unit")
    category: str = Field(..., description="Product category")
    price: float = Field(ge=0, description="Unit selling price")
    cost: float = Field(ge=0, description="Unit cost")
    current_stock: int = Field(ge=0, description="On-hand quantity")
    reorder_level: int = Field(ge=0, description="Stock level at or below which the product is low stock")
    max_stock_level: int | None = Field(default=None, ge=0, description="Maximum stock level (optional)")
    supplier: str = Field(default="", description="Supplier name")
    supplier_id: str | None = Field(default=None, description="Supplier reference (optional)")
    location: str = Field(default="", description="Storage location")
    description: str = Field(default="", description="Product description")
    barcode: str | None = Field(default=None, description="Barcode (optional)")
    user_id: str | None = Field(default=None, description="Owning account")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "prod_10001",
                    "name": "Wireless Mouse",
                    "sku": "SKU-10001",
                    "category": "Electronics",
                    "price": 29.99,
                    "cost": 12.50,
                    "current_stock": 45,
                    "reorder_level": 20,
                    "supplier": "Tech Supplies Inc.",
                    "location": "Aisle 3",
                }
            ]
        },
    }


class OrderItem(BaseModel):
    """Line item on an order."""

    product_id: str = Field(..., description="Product identifier")
    product_name: str = Field(..., description="Product name at order time")
    sku: str = Field(default="", description="Product SKU")
    quantity: int = Field(gt=0, description="Quantity ordered (must be positive)")
    unit_price: float = Field(ge=0, description="Price per unit")
    total_price: float = Field(ge=0, description="Line total")

    model_config = {"frozen": True}


class Order(BaseModel):
    """Sales or purchase order."""

    id: str = Field(..., description="Order identifier")
    order_number: str = Field(default="", description="Human-readable order number")
    type: OrderType = Field(..., description="Order type")
    status: OrderStatus = Field(..., description="Order status")
    total: float = Field(ge=0, description="Total order amount")
    created_at: datetime = Field(..., description="Creation timestamp")
    customer_name: str = Field(default="", description="Customer name")
    customer_email: str | None = Field(default=None, description="Customer email")
    customer_phone: str | None = Field(default=None, description="Customer phone")
    shipping_address: str | None = Field(default=None, description="Shipping address")
    supplier_id: str | None = Field(default=None, description="Supplier reference for purchase orders")
    order_date: datetime | None = Field(default=None, description="Order date")
    expected_delivery: datetime | None = Field(default=None, description="Expected delivery date")
    notes: str | None = Field(default=None, description="Free-form notes")
    items: tuple[OrderItem, ...] = Field(default=(), description="Order line items")
    user_id: str | None = Field(default=None, description="Owning account")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "ord_20240115_001",
                    "order_number": "SO-1001",
                    "type": "sales",
                    "status": "delivered",
                    "total": 149.95,
                    "created_at": "2024-01-15T09:00:00",
                    "customer_name": "Jane Doe",
                    "customer_email": "jane@example.com",
                }
            ]
        },
    }


class Supplier(BaseModel):
    """Supplier record."""

    id: str = Field(..., description="Supplier identifier")
    name: str = Field(..., description="Supplier name")
    contact_person: str | None = Field(default=None, description="Primary contact")
    email: str | None = Field(default=None, description="Contact email")
    phone: str | None = Field(default=None, description="Contact phone")
    address: str | None = Field(default=None, description="Street address")
    city: str | None = Field(default=None, description="City")
    country: str | None = Field(default=None, description="Country")
    payment_terms: str | None = Field(default=None, description="Payment terms (e.g. Net 30)")
    status: SupplierStatus = Field(default="active", description="Supplier status")
    user_id: str | None = Field(default=None, description="Owning account")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")

    model_config = {"frozen": True}
