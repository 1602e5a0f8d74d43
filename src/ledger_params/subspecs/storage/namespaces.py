"""
Database namespace definitions for storage tables.

Defines table names and schema constants for SQLite storage.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KVNamespace:
    """
    Namespace for raw key-value entries.

    Every module state entry is one row. Keys are compared bytewise, which
    gives the ordered iteration the KVStore protocol requires.
    """

    TABLE_NAME: str = "kv_store"
    """Table name for key-value storage."""

    CREATE_TABLE: str = """
        CREATE TABLE IF NOT EXISTS kv_store (
            key BLOB PRIMARY KEY,
            value BLOB NOT NULL
        )
    """
    """SQL to create the key-value table."""


# Singleton instance for convenient access
KV = KVNamespace()

ALL_NAMESPACES = [KV]
"""All namespace definitions for schema initialization."""
