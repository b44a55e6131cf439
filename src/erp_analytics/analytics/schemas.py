"""Derived analytics structures handed to the presentation layer."""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field, NonNegativeFloat, NonNegativeInt

from erp_analytics.data.models import Order, Product

_FROZEN = {"frozen": True}


class MetricsSnapshot(BaseModel):
    """Scalar KPIs for the selected window."""

    total_revenue: NonNegativeFloat = 0.0
    total_orders: NonNegativeInt = 0
    average_order_value: NonNegativeFloat = 0.0
    low_stock_items: NonNegativeInt = 0
    out_of_stock_items: NonNegativeInt = 0
    total_products: NonNegativeInt = 0
    inventory_value: NonNegativeFloat = 0.0

    model_config = _FROZEN


class TimeSeriesPoint(BaseModel):
    """Revenue and order count for one calendar day."""

    date: dt.date
    label: str = Field(..., description="Short display label, e.g. 'Oct 7'")
    revenue: NonNegativeFloat = 0.0
    orders: NonNegativeInt = 0

    model_config = _FROZEN


class DistributionBucket(BaseModel):
    """Number of records sharing a categorical value."""

    name: str
    value: NonNegativeInt

    model_config = _FROZEN


class RankedProduct(BaseModel):
    """Product ranked by estimated stock value."""

    name: str
    revenue: NonNegativeFloat = Field(..., description="Estimated value: price x max(0, stock)")
    stock: int
    category: str

    model_config = _FROZEN


class AnalyticsReport(BaseModel):
    """Everything the analytics view renders for one window."""

    window_days: int
    generated_at: dt.datetime
    metrics: MetricsSnapshot
    revenue_trend: tuple[TimeSeriesPoint, ...] = ()
    order_status: tuple[DistributionBucket, ...] = ()
    top_products: tuple[RankedProduct, ...] = ()
    categories: tuple[DistributionBucket, ...] = ()

    model_config = _FROZEN


class DashboardStats(BaseModel):
    """Headline counters on the dashboard page."""

    total_products: NonNegativeInt = 0
    low_stock_items: NonNegativeInt = 0
    total_orders: NonNegativeInt = 0
    pending_orders: NonNegativeInt = 0
    total_revenue: NonNegativeFloat = 0.0
    total_suppliers: NonNegativeInt = 0

    model_config = _FROZEN


class OrderStats(BaseModel):
    """Counters shown above the order table."""

    total: NonNegativeInt = 0
    pending: NonNegativeInt = 0
    processing: NonNegativeInt = 0
    completed: NonNegativeInt = 0
    revenue: NonNegativeFloat = 0.0

    model_config = _FROZEN


class InventoryStats(BaseModel):
    """Counters shown above the inventory table."""

    total_products: NonNegativeInt = 0
    categories: tuple[str, ...] = ()
    low_stock_items: NonNegativeInt = 0
    out_of_stock_items: NonNegativeInt = 0
    total_value: NonNegativeFloat = 0.0

    model_config = _FROZEN


class SupplierStats(BaseModel):
    """Counters shown above the supplier table."""

    total: NonNegativeInt = 0
    active: NonNegativeInt = 0
    inactive: NonNegativeInt = 0

    model_config = _FROZEN


class DashboardSummary(BaseModel):
    """Dashboard page payload."""

    stats: DashboardStats
    recent_orders: tuple[Order, ...] = ()
    low_stock_products: tuple[Product, ...] = ()

    model_config = _FROZEN


class Insight(BaseModel):
    """Recommendation derived from an analytics report."""

    kind: Literal["low_stock", "revenue_opportunity", "top_performer"]
    title: str
    message: str

    model_config = _FROZEN
