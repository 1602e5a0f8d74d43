"""Base interface for every value type that can be held in the parameter store."""

from __future__ import annotations

from abc import ABC, abstractmethod

from typing_extensions import Self


class ParamCodec(ABC):
    """
    Abstract base class for storable parameter values.

    Each concrete type owns exactly one canonical byte encoding. The store
    adapter never guesses a type: it always decodes with the type that the
    key was registered with.
    """

    @abstractmethod
    def encode_bytes(self) -> bytes:
        """
        Serializes the value to its canonical byte string.

        Returns:
            bytes: The serialized byte string.
        """
        ...

    @classmethod
    @abstractmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Deserializes a byte string into a value of this type.

        Args:
            data (bytes): The byte string to deserialize.

        Raises:
            ParamDecodeError: If `data` is not a valid encoding of this type.

        Returns:
            Self: An instance of the class.
        """
        ...
