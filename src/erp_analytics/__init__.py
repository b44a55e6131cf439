"""Inventory and order analytics for the ERP dashboard."""

__version__ = "0.1.0"
