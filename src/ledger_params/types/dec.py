"""
Fixed-point decimal type.

Fractions such as slash ratios must round identically on every node, so they
are never floats. A `Dec` is a signed 64-bit integer of 10^-8 units:

    Dec.with_prec(5, 1)  ->  raw 50_000_000  ->  "0.50000000"
"""

from __future__ import annotations

import re
from functools import total_ordering
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .codec import ParamCodec
from .exceptions import ParamDecodeError
from .int64 import INT64_MAX, INT64_MIN

_DEC_PATTERN = re.compile(r"^(-)?(\d+)(?:\.(\d{1,8}))?$")


@total_ordering
class Dec(ParamCodec):
    """An immutable decimal with exactly `PRECISION` fractional digits."""

    PRECISION: ClassVar[int] = 8
    """Number of fractional decimal digits."""

    ONE_RAW: ClassVar[int] = 10**8
    """Raw representation of 1.0."""

    BYTE_LENGTH: ClassVar[int] = 8
    """The number of bytes in the canonical encoding."""

    __slots__ = ("_raw",)

    _raw: int

    def __init__(self, raw: int) -> None:
        """
        Wrap a raw fixed-point integer.

        Most callers want one of the named constructors instead.

        Raises:
            TypeError: If `raw` is not an `int`.
            OverflowError: If `raw` does not fit in a signed 64-bit integer.
        """
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"Expected int, got {type(raw).__name__}")
        if not (INT64_MIN <= raw <= INT64_MAX):
            raise OverflowError(f"{raw} is out of range for {type(self).__name__}")
        object.__setattr__(self, "_raw", int(raw))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Self], tuple[int]]:
        """Rebuild through `__init__`, since attributes cannot be set afterwards."""
        return (type(self), (self._raw,))

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_raw(cls, raw: int) -> Self:
        """Build from the raw 10^-8 unit count."""
        return cls(raw)

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Build a whole-number decimal, e.g. `from_int(20)` is 20.0."""
        return cls(value * cls.ONE_RAW)

    @classmethod
    def with_prec(cls, value: int, prec: int) -> Self:
        """
        Build `value * 10^-prec`.

        Raises:
            ValueError: If `prec` is outside [0, PRECISION].
        """
        if not (0 <= prec <= cls.PRECISION):
            raise ValueError(f"precision must be within [0, {cls.PRECISION}], got {prec}")
        return cls(value * 10 ** (cls.PRECISION - prec))

    @classmethod
    def zero(cls) -> Self:
        """Return 0.0."""
        return cls(0)

    @classmethod
    def one(cls) -> Self:
        """Return 1.0."""
        return cls(cls.ONE_RAW)

    @classmethod
    def from_str(cls, text: str) -> Self:
        """
        Parse a decimal string such as "0.05" or "-1.50000000".

        Raises:
            ValueError: If `text` is not a plain decimal with at most 8 fractional digits.
        """
        match = _DEC_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Invalid decimal string: {text!r}")
        sign, whole, frac = match.groups()
        raw = int(whole) * cls.ONE_RAW + int((frac or "").ljust(cls.PRECISION, "0"))
        return cls(-raw if sign else raw)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    @property
    def raw(self) -> int:
        """The raw 10^-8 unit count."""
        return self._raw

    def is_negative(self) -> bool:
        return self._raw < 0

    def quo(self, other: Dec) -> Dec:
        """
        Divide by another decimal.

        The last digit is rounded half to even, so 1/3 and 2/3 round in
        opposite directions and repeated divisions carry no upward bias.

        Raises:
            ZeroDivisionError: If `other` is zero.
        """
        if other._raw == 0:
            raise ZeroDivisionError("Dec division by zero")

        numerator = self._raw * self.ONE_RAW
        quotient, remainder = divmod(abs(numerator), abs(other._raw))

        doubled = 2 * remainder
        if doubled > abs(other._raw) or (doubled == abs(other._raw) and quotient % 2 == 1):
            quotient += 1

        negative = (numerator < 0) != (other._raw < 0)
        return type(self)(-quotient if negative else quotient)

    def mul_int_truncate(self, value: int) -> int:
        """Multiply by an integer and drop the fractional part (toward zero)."""
        product = self._raw * int(value)
        whole = abs(product) // self.ONE_RAW
        return -whole if product < 0 else whole

    # -------------------------------------------------------------------------
    # Codec
    # -------------------------------------------------------------------------

    def encode_bytes(self) -> bytes:
        """Return the raw value as 8 little-endian bytes."""
        return self._raw.to_bytes(self.BYTE_LENGTH, "little", signed=True)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """Parse exactly 8 little-endian bytes as a raw decimal."""
        if len(data) != cls.BYTE_LENGTH:
            raise ParamDecodeError(
                cls.__name__, f"expected {cls.BYTE_LENGTH} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, "little", signed=True))

    # -------------------------------------------------------------------------
    # Pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Accept `Dec` instances in Python and decimal strings in JSON."""

        def validate_python(value: Any) -> Dec:
            if not isinstance(value, cls):
                raise ValueError(f"Expected {cls.__name__}, got {type(value).__name__}")
            return value

        def validate_json(value: str) -> Dec:
            try:
                return cls.from_str(value)
            except OverflowError as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                validate_json, core_schema.str_schema()
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate_python),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: str(instance), when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(core_schema)
        json_schema.update(format="decimal", pattern=_DEC_PATTERN.pattern)
        return json_schema

    # -------------------------------------------------------------------------
    # Comparison and display
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dec):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Dec):
            return NotImplemented
        return self._raw < other._raw

    def __hash__(self) -> int:
        return hash((Dec, self._raw))

    def __str__(self) -> str:
        whole, frac = divmod(abs(self._raw), self.ONE_RAW)
        sign = "-" if self._raw < 0 else ""
        return f"{sign}{whole}.{frac:0{self.PRECISION}d}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"
