"""In-memory key-value store."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .kvstore import BatchOp


class MemoryKVStore:
    """
    Dictionary-backed implementation of the KVStore protocol.

    Each instance is independent, which makes it the store of choice for
    tests and for embedding the registry without a database.
    """

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}

    def get(self, key: bytes) -> bytes | None:
        """Retrieve the value stored under a key."""
        return self._data.get(bytes(key))

    def set(self, key: bytes, value: bytes) -> None:
        """Store a value, replacing any previous one."""
        self._data[bytes(key)] = bytes(value)

    def has(self, key: bytes) -> bool:
        """Check if a key exists in the store."""
        return bytes(key) in self._data

    def delete(self, key: bytes) -> None:
        """Remove a key if present."""
        self._data.pop(bytes(key), None)

    def iterate(self, prefix: bytes = b"") -> Iterator[tuple[bytes, bytes]]:
        """Iterate over entries under `prefix` in ascending key order."""
        # Snapshot the matching entries so callers may write while iterating.
        entries = sorted((k, v) for k, v in self._data.items() if k.startswith(prefix))
        yield from entries

    def write_batch(self, ops: Iterable[BatchOp]) -> None:
        """Apply writes and deletes in order."""
        for key, value in ops:
            if value is None:
                self.delete(key)
            else:
                self.set(key, value)

    def __len__(self) -> int:
        return len(self._data)
