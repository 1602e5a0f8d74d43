"""
Abstract key-value store interface for module state.

Defines the Protocol that every persistence engine must follow.
Uses structural subtyping for flexibility.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol

BatchOp = tuple[bytes, bytes | None]
"""A batched store operation: (key, value), where a None value deletes the key."""


class KVStore(Protocol):
    """
    Protocol for an ordered byte key-value store.

    All store implementations must provide these methods.
    Uses structural subtyping - any class with matching methods satisfies the protocol.

    Keys and values are raw bytes. The store knows nothing about the types
    of the values it holds: typing is the job of the parameter subspace.
    """

    def get(self, key: bytes) -> bytes | None:
        """
        Retrieve the value stored under a key.

        Args:
            key: Full store key.

        Returns:
            Stored bytes if found, None otherwise.
        """
        ...

    def set(self, key: bytes, value: bytes) -> None:
        """
        Store a value, replacing any previous one.

        Args:
            key: Full store key.
            value: Encoded bytes to store.
        """
        ...

    def has(self, key: bytes) -> bool:
        """
        Check if a key exists in the store.

        Args:
            key: Full store key.

        Returns:
            True if a value is stored under the key.
        """
        ...

    def delete(self, key: bytes) -> None:
        """
        Remove a key. Removing a missing key is a no-op.

        Args:
            key: Full store key.
        """
        ...

    def iterate(self, prefix: bytes = b"") -> Iterator[tuple[bytes, bytes]]:
        """
        Iterate over all entries whose key starts with `prefix`.

        Args:
            prefix: Key prefix to filter on. The empty prefix matches everything.

        Returns:
            (key, value) pairs in ascending key order.
        """
        ...

    def write_batch(self, ops: Iterable[BatchOp]) -> None:
        """
        Apply a sequence of writes and deletes as one unit.

        Implementations backed by a transactional engine must commit the
        whole sequence at once, so no reader sees a prefix of it.

        Args:
            ops: (key, value) pairs applied in order; a None value deletes.
        """
        ...
