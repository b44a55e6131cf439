"""Data models and sample data generation."""

from .models import Order, OrderItem, Product, Supplier
from .sample_generator import SampleDataGenerator

__all__ = ["Product", "Order", "OrderItem", "Supplier", "SampleDataGenerator"]
