"""Record sources feeding the analytics."""

from erp_analytics.store.base import DataStore, Snapshot, load_snapshot
from erp_analytics.store.json_store import JsonDataStore
from erp_analytics.store.memory_store import MemoryDataStore

__all__ = ["DataStore", "Snapshot", "load_snapshot", "JsonDataStore", "MemoryDataStore"]
