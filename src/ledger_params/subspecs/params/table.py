"""
Parameter table: the explicit binding of keys to typed fields.

A table is built once, when the owning module is imported. Every
registration is checked right away, so a duplicated key or a field without
a key aborts start-up instead of surfacing on some later read.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from ledger_params.types import ParamCodec, ParamSchemaError, ParamTypeError

from .keys import ParamKey

ParamValidator = Callable[[str, Any], None]
"""Domain check for one parameter: called with (field name, value), raises on violation."""


@dataclass(frozen=True, slots=True)
class ParamDescriptor:
    """Binds one key to the field holding its value and to the field's type."""

    key: ParamKey
    """Store key of the parameter."""

    field_name: str
    """Name of the parameter set field that holds the value."""

    value_type: type[ParamCodec]
    """Exact type of the value; also selects the byte codec."""

    validator: ParamValidator | None = None
    """Optional domain check run on every write."""

    def check(self, value: Any) -> None:
        """
        Check that `value` may be stored under this descriptor.

        Raises:
            ParamTypeError: If `value` is not exactly `value_type`.
            ParamValueError: If the domain check rejects `value`.
        """
        if type(value) is not self.value_type:
            raise ParamTypeError(
                self.key,
                expected_type=self.value_type.__name__,
                actual_type=type(value).__name__,
            )
        if self.validator is not None:
            self.validator(self.field_name, value)


class ParamTable:
    """
    Ordered, append-only registry of parameter descriptors.

    Iteration follows registration order, which is also the order in which
    a full parameter set is written.
    """

    def __init__(self, name: str, descriptors: Iterable[ParamDescriptor] = ()) -> None:
        """
        Create a table and register `descriptors` in order.

        Args:
            name: Table name used in error messages.
            descriptors: Initial registrations.

        Raises:
            ParamSchemaError: If two descriptors share a key or a field.
        """
        self._name = name
        self._by_key: dict[bytes, ParamDescriptor] = {}
        self._by_field: dict[str, ParamDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    @property
    def name(self) -> str:
        return self._name

    def register(self, descriptor: ParamDescriptor) -> None:
        """
        Append one descriptor.

        Raises:
            ParamSchemaError: If the key or the field is already registered.
        """
        if descriptor.key in self._by_key:
            raise ParamSchemaError(self._name, f"duplicate key {descriptor.key!r}")
        if descriptor.field_name in self._by_field:
            raise ParamSchemaError(
                self._name, f"field '{descriptor.field_name}' is registered twice"
            )
        self._by_key[descriptor.key] = descriptor
        self._by_field[descriptor.field_name] = descriptor

    def descriptor(self, key: bytes) -> ParamDescriptor:
        """
        Look up the descriptor of a key.

        Raises:
            ParamTypeError: If the key is not registered.
        """
        try:
            return self._by_key[key]
        except KeyError:
            raise ParamTypeError(key) from None

    def check_covers(self, model: type[BaseModel]) -> None:
        """
        Verify that the table and `model` describe the same fields.

        Every model field must be registered exactly once, every descriptor
        must name a model field, and the declared types must agree.

        Raises:
            ParamSchemaError: On any mismatch.
        """
        model_fields = model.model_fields

        missing = [name for name in model_fields if name not in self._by_field]
        if missing:
            raise ParamSchemaError(self._name, f"unregistered fields: {', '.join(missing)}")

        unknown = [name for name in self._by_field if name not in model_fields]
        if unknown:
            raise ParamSchemaError(
                self._name, f"{model.__name__} has no fields: {', '.join(unknown)}"
            )

        for name, descriptor in self._by_field.items():
            annotation = model_fields[name].annotation
            if annotation is not descriptor.value_type:
                raise ParamSchemaError(
                    self._name,
                    f"field '{name}' is {annotation}, "
                    f"but key {descriptor.key!r} is registered as {descriptor.value_type.__name__}",
                )

    def keys(self) -> list[ParamKey]:
        """All registered keys, in registration order."""
        return [descriptor.key for descriptor in self._by_key.values()]

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[ParamDescriptor]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)
