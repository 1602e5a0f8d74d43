"""Reusable type definitions for the ledger parameter registry."""

from .base import StrictBaseModel
from .codec import ParamCodec
from .dec import Dec
from .duration import Duration
from .exceptions import (
    ParamDecodeError,
    ParamError,
    ParamNotFoundError,
    ParamSchemaError,
    ParamTypeError,
    ParamValueError,
)
from .int64 import INT64_MAX, INT64_MIN, Int64
from .text import Text

__all__ = [
    # Core types
    "Int64",
    "INT64_MIN",
    "INT64_MAX",
    "Duration",
    "Dec",
    "Text",
    "ParamCodec",
    "StrictBaseModel",
    # Exceptions
    "ParamError",
    "ParamSchemaError",
    "ParamTypeError",
    "ParamValueError",
    "ParamNotFoundError",
    "ParamDecodeError",
]
