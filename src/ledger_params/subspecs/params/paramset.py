"""Base class for a module's full parameter set."""

from __future__ import annotations

from abc import abstractmethod

from ledger_params.types import ParamCodec, StrictBaseModel

from .keys import ParamKey
from .table import ParamTable


class ParamSet(StrictBaseModel):
    """
    The complete, immutable collection of one module's parameter values.

    Subclasses declare one field per parameter and return, from
    `param_table()`, the table mapping each field to its store key.
    Values are replaced only by building a new set, never by mutating one.

    A subclass that does not bind a table stays abstract and cannot be
    instantiated.
    """

    @classmethod
    @abstractmethod
    def param_table(cls) -> ParamTable:
        """
        Key table of the set.

        Returns:
            ParamTable: The table binding each field to its store key.
        """
        ...

    def key_value_pairs(self) -> list[tuple[ParamKey, ParamCodec]]:
        """
        Pair every registered key with the current value of its field.

        Returns:
            (key, value) pairs in table order.
        """
        return [(d.key, getattr(self, d.field_name)) for d in self.param_table()]
