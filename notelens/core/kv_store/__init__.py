"""
Key-value store implementations for NoteLens.

Provides abstract base and concrete implementations for small state.
"""

from notelens.core.kv_store.base import KeyValueStore
from notelens.core.kv_store.json_store import JSONFileKeyValueStore
from notelens.core.kv_store.memory_store import InMemoryKeyValueStore

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JSONFileKeyValueStore",
]
