"""Signed 64-bit integer type."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .codec import ParamCodec
from .exceptions import ParamDecodeError

INT64_MIN = -(2**63)
"""The minimum value for a signed 64-bit integer."""

INT64_MAX = 2**63 - 1
"""The maximum value for a signed 64-bit integer."""


class Int64(int, ParamCodec):
    """
    A signed 64-bit integer (int64) that inherits from `int`.

    Counts and amounts are stored as 8 bytes, little-endian two's complement.
    """

    BYTE_LENGTH: ClassVar[int] = 8
    """The number of bytes in the canonical encoding."""

    def __new__(cls, value: Any) -> Self:
        """
        Create and validate a new Int64 instance.

        Raises:
            TypeError: If `value` is not an `int` (booleans are rejected).
            OverflowError: If `value` is outside [INT64_MIN, INT64_MAX].
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        int_value = int(value)
        if not (INT64_MIN <= int_value <= INT64_MAX):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> Int64:
            """Accept only instances of this exact type."""
            if type(value) is not cls:
                raise ValueError(f"Expected {cls.__name__}, got {type(value).__name__}")
            return value

        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                cls, core_schema.int_schema(ge=INT64_MIN, le=INT64_MAX)
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format="int64")
        return json_schema

    def as_int(self) -> int:
        """Return the value as a plain Python `int`."""
        return int(self)

    def encode_bytes(self) -> bytes:
        """Return the 8-byte little-endian two's complement encoding."""
        return int(self).to_bytes(self.BYTE_LENGTH, "little", signed=True)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """Parse exactly 8 little-endian bytes as a value of this type."""
        if len(data) != cls.BYTE_LENGTH:
            raise ParamDecodeError(
                cls.__name__, f"expected {cls.BYTE_LENGTH} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, "little", signed=True))

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))
