"""Key-value store view scoped to a key prefix."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .kvstore import BatchOp, KVStore


class PrefixKVStore:
    """
    A KVStore view that transparently prepends `prefix` to every key.

    Modules share one physical store; each module's parameters live under
    their own prefix, so keys of different modules can never collide.
    """

    def __init__(self, parent: KVStore, prefix: bytes) -> None:
        if not prefix:
            raise ValueError("PrefixKVStore requires a non-empty prefix")
        self._parent = parent
        self._prefix = bytes(prefix)

    @property
    def prefix(self) -> bytes:
        return self._prefix

    def _key(self, key: bytes) -> bytes:
        return self._prefix + bytes(key)

    def get(self, key: bytes) -> bytes | None:
        return self._parent.get(self._key(key))

    def set(self, key: bytes, value: bytes) -> None:
        self._parent.set(self._key(key), value)

    def has(self, key: bytes) -> bool:
        return self._parent.has(self._key(key))

    def delete(self, key: bytes) -> None:
        self._parent.delete(self._key(key))

    def iterate(self, prefix: bytes = b"") -> Iterator[tuple[bytes, bytes]]:
        """Iterate over the view, yielding keys with the view prefix stripped."""
        strip = len(self._prefix)
        for key, value in self._parent.iterate(self._key(prefix)):
            yield key[strip:], value

    def write_batch(self, ops: Iterable[BatchOp]) -> None:
        self._parent.write_batch((self._key(key), value) for key, value in ops)
