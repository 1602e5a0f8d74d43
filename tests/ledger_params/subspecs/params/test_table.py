"""Tests for parameter keys and descriptor tables."""

from __future__ import annotations

from typing import Any

import pytest

from ledger_params.subspecs.params import ParamDescriptor, ParamKey, ParamSet, ParamTable
from ledger_params.types import (
    Dec,
    Int64,
    ParamSchemaError,
    ParamTypeError,
    ParamValueError,
    Text,
)

KEY_A = ParamKey(b"A")
KEY_B = ParamKey(b"B")


def _positive(name: str, value: Any) -> None:
    if value <= 0:
        raise ParamValueError(name, value, "must be positive")


class TwoParams(ParamSet):
    """Minimal parameter set used to exercise table checks."""

    a: Int64
    b: Text


class TestParamKey:
    def test_is_bytes(self) -> None:
        key = ParamKey(b"SlashAmount")
        assert isinstance(key, bytes)
        assert key == b"SlashAmount"
        assert key.name == "SlashAmount"
        assert repr(key) == "ParamKey(b'SlashAmount')"

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError, match="1 to 255 bytes"):
            ParamKey(b"")

    def test_rejects_too_long(self) -> None:
        with pytest.raises(ValueError, match="1 to 255 bytes"):
            ParamKey(b"k" * 256)

    def test_rejects_str(self) -> None:
        with pytest.raises(TypeError, match="Expected bytes, got str"):
            ParamKey("SlashAmount")


class TestDescriptorCheck:
    def test_accepts_exact_type(self) -> None:
        ParamDescriptor(KEY_A, "a", Int64, _positive).check(Int64(1))

    @pytest.mark.parametrize("value", [1, Dec.one(), Text("1")])
    def test_rejects_other_types(self, value: Any) -> None:
        descriptor = ParamDescriptor(KEY_A, "a", Int64)
        with pytest.raises(ParamTypeError, match="expects Int64"):
            descriptor.check(value)

    def test_runs_validator(self) -> None:
        descriptor = ParamDescriptor(KEY_A, "a", Int64, _positive)
        with pytest.raises(ParamValueError, match="Invalid a 0: must be positive"):
            descriptor.check(Int64(0))


class TestParamTable:
    def test_iterates_in_registration_order(self) -> None:
        table = ParamTable(
            "t", [ParamDescriptor(KEY_B, "b", Text), ParamDescriptor(KEY_A, "a", Int64)]
        )
        assert table.keys() == [KEY_B, KEY_A]
        assert [d.field_name for d in table] == ["b", "a"]
        assert len(table) == 2
        assert KEY_A in table

    def test_duplicate_key_rejected(self) -> None:
        """Registering a key twice fails before any read or write is possible."""
        with pytest.raises(ParamSchemaError, match="duplicate key"):
            ParamTable(
                "t", [ParamDescriptor(KEY_A, "a", Int64), ParamDescriptor(KEY_A, "b", Text)]
            )

    def test_duplicate_key_rejected_on_register(self) -> None:
        table = ParamTable("t", [ParamDescriptor(KEY_A, "a", Int64)])
        with pytest.raises(ParamSchemaError, match="duplicate key"):
            table.register(ParamDescriptor(ParamKey(b"A"), "other", Int64))
        assert len(table) == 1

    def test_duplicate_field_rejected(self) -> None:
        with pytest.raises(ParamSchemaError, match="field 'a' is registered twice"):
            ParamTable(
                "t", [ParamDescriptor(KEY_A, "a", Int64), ParamDescriptor(KEY_B, "a", Int64)]
            )

    def test_unknown_key_lookup(self) -> None:
        table = ParamTable("t")
        with pytest.raises(ParamTypeError, match="not registered"):
            table.descriptor(KEY_A)


class TestCheckCovers:
    def test_complete_table_passes(self) -> None:
        table = ParamTable(
            "t", [ParamDescriptor(KEY_A, "a", Int64), ParamDescriptor(KEY_B, "b", Text)]
        )
        table.check_covers(TwoParams)

    def test_missing_field_rejected(self) -> None:
        table = ParamTable("t", [ParamDescriptor(KEY_A, "a", Int64)])
        with pytest.raises(ParamSchemaError, match="unregistered fields: b"):
            table.check_covers(TwoParams)

    def test_unknown_field_rejected(self) -> None:
        table = ParamTable(
            "t",
            [
                ParamDescriptor(KEY_A, "a", Int64),
                ParamDescriptor(KEY_B, "b", Text),
                ParamDescriptor(ParamKey(b"C"), "c", Int64),
            ],
        )
        with pytest.raises(ParamSchemaError, match="TwoParams has no fields: c"):
            table.check_covers(TwoParams)

    def test_type_mismatch_rejected(self) -> None:
        table = ParamTable(
            "t", [ParamDescriptor(KEY_A, "a", Dec), ParamDescriptor(KEY_B, "b", Text)]
        )
        with pytest.raises(ParamSchemaError, match="registered as Dec"):
            table.check_covers(TwoParams)


def test_param_set_without_table() -> None:
    """A set that never bound a table is abstract and cannot be built."""
    with pytest.raises(TypeError, match="abstract"):
        TwoParams(a=Int64(1), b=Text("x"))


def test_param_set_with_table() -> None:
    table = ParamTable(
        "t", [ParamDescriptor(KEY_A, "a", Int64), ParamDescriptor(KEY_B, "b", Text)]
    )

    class BoundParams(TwoParams):
        @classmethod
        def param_table(cls) -> ParamTable:
            return table

    params = BoundParams(a=Int64(1), b=Text("x"))
    assert params.key_value_pairs() == [(KEY_A, Int64(1)), (KEY_B, Text("x"))]
