"""Duration type: a span of time in nanoseconds."""

from __future__ import annotations

from datetime import timedelta
from typing import ClassVar

from pydantic import GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .int64 import Int64

NANOS_PER_SECOND = 10**9
"""Nanoseconds in one second."""


class Duration(Int64):
    """
    A span of time counted in nanoseconds.

    Shares the `Int64` encoding so a stored duration is a single scalar
    time unit. Negative values are representable; domain checks belong
    to the parameter set that uses the duration.

    Conversions to coarser units truncate toward zero, for negative
    durations too.
    """

    UNIT: ClassVar[str] = "ns"
    """The scalar time unit of the raw value."""

    @classmethod
    def from_seconds(cls, seconds: int) -> Self:
        """Build a duration from a whole number of seconds."""
        return cls(seconds * NANOS_PER_SECOND)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Self:
        """Build a duration from a `timedelta` (microsecond resolution)."""
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        return cls(micros * 1_000)

    @property
    def seconds(self) -> int:
        """Whole seconds, truncated toward zero."""
        return self._truncate(NANOS_PER_SECOND)

    def to_timedelta(self) -> timedelta:
        """Convert to a `timedelta`, truncating sub-microsecond precision toward zero."""
        return timedelta(microseconds=self._truncate(1_000))

    def _truncate(self, unit: int) -> int:
        whole = abs(int(self)) // unit
        return -whole if self < 0 else whole

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Document the raw unit in the JSON schema."""
        json_schema = handler(core_schema)
        json_schema.update(format="int64", description="Duration in nanoseconds.")
        return json_schema
