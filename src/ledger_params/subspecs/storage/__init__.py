"""
Storage module for module state.

Defines the key-value store contract that the persistence engine satisfies,
plus reference implementations for embedding and testing.
"""

from .cache import CacheKVStore
from .kvstore import BatchOp, KVStore
from .memory import MemoryKVStore
from .namespaces import KV, KVNamespace
from .prefix import PrefixKVStore
from .sqlite import SQLiteKVStore

__all__ = [
    "BatchOp",
    "KVStore",
    "MemoryKVStore",
    "CacheKVStore",
    "PrefixKVStore",
    "SQLiteKVStore",
    "KVNamespace",
    "KV",
]
