"""Exception hierarchy for the parameter registry."""

from __future__ import annotations

from typing import Any


class ParamError(Exception):
    """
    Base exception for all parameter registry errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class ParamSchemaError(ParamError):
    """
    Raised when a parameter table is incorrectly defined.

    A schema defect is detected while the table is built, before any
    read or write can happen.

    Attributes:
        table_name: The name of the table with the definition error.
        detail: Description of the defect.
    """

    def __init__(self, table_name: str, detail: str) -> None:
        self.table_name = table_name
        self.detail = detail
        super().__init__(f"{table_name}: {detail}")


class ParamTypeError(ParamError):
    """
    Raised when a key or value does not match the registered descriptor.

    This is a programming error at the call site, not a recoverable condition.

    Attributes:
        key: The parameter key involved.
        expected_type: The type that was expected (if applicable).
        actual_type: The actual type of the value (if applicable).
    """

    def __init__(
        self,
        key: bytes,
        *,
        expected_type: str | None = None,
        actual_type: str | None = None,
    ) -> None:
        self.key = key
        self.expected_type = expected_type
        self.actual_type = actual_type

        if expected_type is None:
            msg = f"Parameter key {key!r} is not registered"
        else:
            msg = f"Parameter {key!r} expects {expected_type}, got {actual_type}"

        super().__init__(msg)


class ParamValueError(ParamError):
    """
    Raised when a value has the right type but violates its domain constraint.

    Attributes:
        name: The parameter or argument that was rejected.
        value: The rejected value.
        constraint: Description of the violated constraint.
    """

    def __init__(self, name: str, value: Any, constraint: str) -> None:
        self.name = name
        self.value = value
        self.constraint = constraint
        super().__init__(f"Invalid {name} {value!s}: {constraint}")


class ParamNotFoundError(ParamError):
    """
    Raised when a registered key has never been written to the store.

    Attributes:
        key: The parameter key that was read.
    """

    def __init__(self, key: bytes) -> None:
        self.key = key
        super().__init__(f"Parameter {key!r} is not set")


class ParamDecodeError(ParamError):
    """
    Raised when stored bytes cannot be decoded as the expected type.

    Signals corrupted state. It is never replaced by a default value.

    Attributes:
        type_name: The type being decoded.
        detail: Description of what went wrong.
        key: The parameter key being read (if known).
    """

    def __init__(
        self,
        type_name: str,
        detail: str,
        *,
        key: bytes | None = None,
    ) -> None:
        self.type_name = type_name
        self.detail = detail
        self.key = key

        msg = f"Failed to decode {type_name}: {detail}"
        if key is not None:
            msg = f"{msg} (parameter {key!r})"

        super().__init__(msg)
