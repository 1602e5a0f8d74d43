"""
Write-buffering branch of a key-value store.

A branch collects writes and deletes in memory and reads through to its
parent for everything it has not touched. Nothing reaches the parent until
`write()` is called, so a batch of writes is either flushed as a whole or
dropped as a whole.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .kvstore import BatchOp, KVStore

logger = logging.getLogger(__name__)

_DELETED = None
"""Marker for a buffered delete."""


class CacheKVStore:
    """
    A KVStore that buffers writes on top of a parent KVStore.

    Readers of the parent never observe a partially applied batch: until
    `write()` the parent is untouched, and `write()` hands the whole
    buffer to the parent as a single batch.
    """

    def __init__(self, parent: KVStore) -> None:
        """
        Branch off a parent store.

        Args:
            parent: Store that receives the buffered writes on `write()`.
        """
        self._parent = parent
        self._pending: dict[bytes, bytes | None] = {}

    @property
    def parent(self) -> KVStore:
        """The store this branch flushes into."""
        return self._parent

    def get(self, key: bytes) -> bytes | None:
        """Read the buffered value, falling through to the parent."""
        key = bytes(key)
        if key in self._pending:
            return self._pending[key]
        return self._parent.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        """Buffer a write."""
        self._pending[bytes(key)] = bytes(value)

    def has(self, key: bytes) -> bool:
        """Check the buffer first, then the parent."""
        return self.get(key) is not None

    def delete(self, key: bytes) -> None:
        """Buffer a delete."""
        self._pending[bytes(key)] = _DELETED

    def iterate(self, prefix: bytes = b"") -> Iterator[tuple[bytes, bytes]]:
        """Iterate over the merged view of buffer and parent, in key order."""
        merged = dict(self._parent.iterate(prefix))
        for key, value in self._pending.items():
            if not key.startswith(prefix):
                continue
            if value is _DELETED:
                merged.pop(key, None)
            else:
                merged[key] = value
        yield from sorted(merged.items())

    def write_batch(self, ops: Iterable[BatchOp]) -> None:
        """Buffer a batch of writes and deletes."""
        for key, value in ops:
            self._pending[bytes(key)] = None if value is None else bytes(value)

    def is_dirty(self) -> bool:
        """Whether the branch holds writes that have not been flushed."""
        return bool(self._pending)

    def write(self) -> None:
        """
        Flush every buffered operation into the parent, in key order.

        The buffer is empty afterwards, so the branch can be reused. If the
        parent rejects the batch the buffer is kept.
        """
        self._parent.write_batch(sorted(self._pending.items()))

        logger.debug("Flushed %d buffered store operations", len(self._pending))
        self._pending = {}

    def discard(self) -> None:
        """Drop every buffered operation without touching the parent."""
        self._pending.clear()
