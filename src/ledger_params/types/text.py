"""Text type: identifiers stored as UTF-8."""

from __future__ import annotations

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .codec import ParamCodec
from .exceptions import ParamDecodeError


class Text(str, ParamCodec):
    """An identifier string stored as raw UTF-8."""

    def __new__(cls, value: Any) -> Self:
        """
        Create a new Text instance.

        Raises:
            TypeError: If `value` is not a `str`.
        """
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        return super().__new__(cls, value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> Text:
            if type(value) is not cls:
                raise ValueError(f"Expected {cls.__name__}, got {type(value).__name__}")
            return value

        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                cls, core_schema.str_schema()
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: str(instance)
            ),
        )

    def encode_bytes(self) -> bytes:
        """Return the UTF-8 encoding."""
        return str(self).encode("utf-8")

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """Decode strict UTF-8."""
        try:
            return cls(data.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise ParamDecodeError(cls.__name__, str(e)) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"
