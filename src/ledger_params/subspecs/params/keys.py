"""Parameter key type."""

from __future__ import annotations

from typing import Any, ClassVar

from typing_extensions import Self


class ParamKey(bytes):
    """
    An opaque, immutable identifier addressing one parameter in a subspace.

    Once deployed, a key keeps its meaning forever: renaming a key orphans
    the value stored under the old name.
    """

    MAX_LENGTH: ClassVar[int] = 255
    """Upper bound on the key length in bytes."""

    def __new__(cls, value: Any) -> Self:
        """
        Create and validate a new key.

        Raises:
            TypeError: If `value` is not `bytes`.
            ValueError: If the key is empty or longer than `MAX_LENGTH`.
        """
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError(f"Expected bytes, got {type(value).__name__}")
        if not 0 < len(value) <= cls.MAX_LENGTH:
            raise ValueError(
                f"{cls.__name__} must be 1 to {cls.MAX_LENGTH} bytes, got {len(value)}"
            )
        return super().__new__(cls, bytes(value))

    @property
    def name(self) -> str:
        """Human-readable form of the key."""
        return self.decode("utf-8", errors="backslashreplace")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self)!r})"
