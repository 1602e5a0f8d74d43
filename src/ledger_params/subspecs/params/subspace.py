"""
Subspace: the typed adapter between a parameter table and a key-value store.

The store holds bytes. The table says which type lives under each key. The
subspace is the only place where the two meet, so a value is always encoded
and decoded with the type its key was registered with.

Layout
------
Each module owns a namespace. A parameter is stored at:

    <namespace> "/" <key>  ->  value_type.encode_bytes()

Writes
------
`set` writes one key. `set_param_set` writes every key of a parameter set
into a buffered branch of the store and flushes the branch only once every
value has been checked and encoded, so a rejected set writes nothing.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from ledger_params.config import LEDGER_ENV
from ledger_params.subspecs.metrics import (
    param_decode_failures,
    param_reads,
    param_set_commits,
    param_writes,
)
from ledger_params.subspecs.storage import CacheKVStore, KVStore, PrefixKVStore
from ledger_params.types import (
    ParamCodec,
    ParamDecodeError,
    ParamNotFoundError,
    ParamSchemaError,
)

from .keys import ParamKey
from .paramset import ParamSet
from .table import ParamTable

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=ParamSet)

VALIDATE_ON_READ = LEDGER_ENV == "test"
"""Re-run domain checks on every decoded value (test environment only)."""


class Subspace:
    """
    A module's view of the parameter store.

    The subspace is an explicit handle: it owns the store reference and is
    passed to whoever needs parameter access. There is no ambient global.
    """

    def __init__(self, store: KVStore, name: str, table: ParamTable) -> None:
        """
        Bind a namespace of `store` to a parameter table.

        Args:
            store: Backing key-value store, shared with other modules.
            name: Namespace of the owning module, e.g. "slashing".
            table: Key table of the module's parameters.

        Raises:
            ValueError: If `name` is empty or contains the separator.
        """
        if not name or "/" in name:
            raise ValueError(f"Invalid subspace name: {name!r}")

        self._name = name
        self._table = table
        self._store = PrefixKVStore(store, name.encode("utf-8") + b"/")

    @property
    def name(self) -> str:
        return self._name

    @property
    def table(self) -> ParamTable:
        return self._table

    # -------------------------------------------------------------------------
    # Single-key access
    # -------------------------------------------------------------------------

    def get(self, key: ParamKey) -> ParamCodec:
        """
        Read and decode the value stored under `key`.

        Raises:
            ParamTypeError: If `key` is not registered.
            ParamNotFoundError: If nothing was ever stored under `key`.
            ParamDecodeError: If the stored bytes are not a valid encoding
                of the registered type.
        """
        value = self.get_if_exists(key)
        if value is None:
            raise ParamNotFoundError(key)
        return value

    def get_if_exists(self, key: ParamKey) -> ParamCodec | None:
        """
        Read and decode `key`, or return None if it was never stored.

        Decode failures still raise: an undecodable value is corruption,
        not absence.
        """
        descriptor = self._table.descriptor(key)

        data = self._store.get(key)
        if data is None:
            return None

        try:
            value = descriptor.value_type.decode_bytes(data)
        except ParamDecodeError as e:
            param_decode_failures.labels(subspace=self._name).inc()
            logger.warning(
                "Corrupt parameter %s/%s: %s", self._name, descriptor.key.name, e.detail
            )
            raise ParamDecodeError(e.type_name, e.detail, key=key) from e

        if VALIDATE_ON_READ:
            descriptor.check(value)

        param_reads.labels(subspace=self._name).inc()
        return value

    def has(self, key: ParamKey) -> bool:
        """Whether a value is stored under a registered key."""
        self._table.descriptor(key)
        return self._store.has(key)

    def set(self, key: ParamKey, value: ParamCodec) -> None:
        """
        Check, encode and store one value.

        Raises:
            ParamTypeError: If `key` is unknown or `value` has the wrong type.
            ParamValueError: If `value` violates the key's domain check.
        """
        descriptor = self._table.descriptor(key)
        descriptor.check(value)

        self._store.set(key, value.encode_bytes())

        param_writes.labels(subspace=self._name).inc()
        logger.debug("Set parameter %s/%s = %s", self._name, descriptor.key.name, value)

    # -------------------------------------------------------------------------
    # Whole-set access
    # -------------------------------------------------------------------------

    def set_param_set(self, params: ParamSet) -> None:
        """
        Store every parameter of `params` as one unit.

        All values are checked and encoded into a buffered branch first.
        The branch reaches the store in a single batch, so readers see either
        the previous set or the new one, never a mix.

        Raises:
            ParamSchemaError: If `params` is keyed by a different table.
            ParamValueError: If any value violates its domain check.
        """
        if params.param_table().keys() != self._table.keys():
            raise ParamSchemaError(
                self._table.name, f"{type(params).__name__} does not match subspace {self._name}"
            )

        branch = CacheKVStore(self._store)

        for key, value in params.key_value_pairs():
            descriptor = self._table.descriptor(key)
            descriptor.check(value)
            branch.set(key, value.encode_bytes())

        branch.write()

        param_writes.labels(subspace=self._name).inc(len(self._table))
        param_set_commits.labels(subspace=self._name).inc()
        logger.info("Committed %d parameters to subspace %s", len(self._table), self._name)

    def get_param_set(self, model: type[P]) -> P:
        """
        Read every registered key and assemble a full parameter set.

        Raises:
            ParamNotFoundError: If any key was never stored.
            ParamDecodeError: If any stored value is corrupt.
        """
        values = {descriptor.field_name: self.get(descriptor.key) for descriptor in self._table}
        return model(**values)
