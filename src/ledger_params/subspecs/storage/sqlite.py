"""
SQLite key-value store for module state.

This module provides persistent storage for parameter entries:

- One row per store key, in a single `kv_store` table
- Keys are BLOBs compared bytewise, so range scans are ordered
- Values are the already-encoded parameter bytes

A batch of writes is committed in a single SQLite transaction.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Iterator
from pathlib import Path

from .kvstore import BatchOp
from .namespaces import ALL_NAMESPACES, KV


def _prefix_end(prefix: bytes) -> bytes | None:
    """
    Smallest key greater than every key starting with `prefix`.

    Returns None when no such bound exists (empty or all-0xff prefix).
    """
    trimmed = prefix.rstrip(b"\xff")
    if not trimmed:
        return None
    return trimmed[:-1] + bytes([trimmed[-1] + 1])


class SQLiteKVStore:
    """
    SQLite implementation of the KVStore protocol.

    Stores entries in a single SQLite file.
    Thread-safe through SQLite's built-in locking.
    """

    def __init__(self, path: Path | str) -> None:
        """
        Initialize SQLite store.

        Creates database file and table if they don't exist.

        Args:
            path: Path to SQLite database file.
                  Use ":memory:" for in-memory database.
        """
        self._path = Path(path) if isinstance(path, str) else path

        # The check_same_thread=False flag allows multiple threads to share
        # this connection. SQLite serializes writes internally.
        self._conn = sqlite3.connect(
            str(self._path),
            check_same_thread=False,
        )
        self._conn.row_factory = sqlite3.Row

        self._init_schema()

    def _init_schema(self) -> None:
        """Create tables if they don't exist."""
        cursor = self._conn.cursor()
        for namespace in ALL_NAMESPACES:
            cursor.execute(namespace.CREATE_TABLE)
        self._conn.commit()

    def get(self, key: bytes) -> bytes | None:
        """Retrieve the value stored under a key."""
        cursor = self._conn.cursor()
        cursor.execute(
            f"SELECT value FROM {KV.TABLE_NAME} WHERE key = ?",
            (bytes(key),),
        )
        row = cursor.fetchone()
        if row is None:
            return None
        return bytes(row["value"])

    def set(self, key: bytes, value: bytes) -> None:
        """Store a value, replacing any previous one."""
        cursor = self._conn.cursor()
        cursor.execute(
            f"INSERT OR REPLACE INTO {KV.TABLE_NAME} (key, value) VALUES (?, ?)",
            (bytes(key), bytes(value)),
        )

        # Commit immediately to ensure durability.
        self._conn.commit()

    def has(self, key: bytes) -> bool:
        """Check if a key exists in the store."""
        cursor = self._conn.cursor()

        # SELECT 1 is an existence check; the value is never read.
        cursor.execute(
            f"SELECT 1 FROM {KV.TABLE_NAME} WHERE key = ?",
            (bytes(key),),
        )
        return cursor.fetchone() is not None

    def delete(self, key: bytes) -> None:
        """Remove a key if present."""
        cursor = self._conn.cursor()
        cursor.execute(f"DELETE FROM {KV.TABLE_NAME} WHERE key = ?", (bytes(key),))
        self._conn.commit()

    def iterate(self, prefix: bytes = b"") -> Iterator[tuple[bytes, bytes]]:
        """Iterate over entries under `prefix` in ascending key order."""
        cursor = self._conn.cursor()

        # BLOB comparison is memcmp, so a half-open key range selects
        # exactly the keys that start with the prefix.
        end = _prefix_end(bytes(prefix))
        if end is None:
            cursor.execute(
                f"SELECT key, value FROM {KV.TABLE_NAME} WHERE key >= ? ORDER BY key",
                (bytes(prefix),),
            )
        else:
            cursor.execute(
                f"SELECT key, value FROM {KV.TABLE_NAME} "
                "WHERE key >= ? AND key < ? ORDER BY key",
                (bytes(prefix), end),
            )

        for row in cursor.fetchall():
            yield bytes(row["key"]), bytes(row["value"])

    def write_batch(self, ops: Iterable[BatchOp]) -> None:
        """
        Apply writes and deletes in one transaction.

        The connection context manager commits on success and rolls back
        on any exception, so a failed batch leaves no trace.
        """
        with self._conn:
            for key, value in ops:
                if value is None:
                    self._conn.execute(
                        f"DELETE FROM {KV.TABLE_NAME} WHERE key = ?", (bytes(key),)
                    )
                else:
                    self._conn.execute(
                        f"INSERT OR REPLACE INTO {KV.TABLE_NAME} (key, value) VALUES (?, ?)",
                        (bytes(key), bytes(value)),
                    )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close database connection."""
        self._conn.close()

    def __enter__(self) -> SQLiteKVStore:
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()
