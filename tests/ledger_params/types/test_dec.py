"""Fixed-point Decimal Type Tests."""

import copy
import pickle
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError, create_model

from ledger_params.types import INT64_MAX, INT64_MIN, Dec, ParamDecodeError


class TestConstruction:
    """Tests for the named constructors."""

    def test_from_int(self) -> None:
        assert Dec.from_int(20).raw == 20 * 10**8

    def test_with_prec(self) -> None:
        """with_prec(5, 1) is 0.5."""
        assert Dec.with_prec(5, 1) == Dec.from_raw(50_000_000)

    @pytest.mark.parametrize("prec", [-1, 9])
    def test_with_prec_out_of_range(self, prec: int) -> None:
        with pytest.raises(ValueError, match="precision"):
            Dec.with_prec(1, prec)

    def test_zero_and_one(self) -> None:
        assert Dec.zero().raw == 0
        assert Dec.one().raw == Dec.ONE_RAW

    def test_rejects_non_int_raw(self) -> None:
        with pytest.raises(TypeError, match="Expected int, got float"):
            Dec(0.5)  # type: ignore[arg-type]

    def test_rejects_raw_overflow(self) -> None:
        with pytest.raises(OverflowError):
            Dec(INT64_MAX + 1)

    def test_is_immutable(self) -> None:
        value = Dec.one()
        with pytest.raises(AttributeError):
            value._raw = 0  # type: ignore[misc]


class TestParsing:
    """Tests for decimal string parsing and display."""

    @pytest.mark.parametrize(
        "text, raw",
        [
            ("0", 0),
            ("1", 10**8),
            ("0.5", 50_000_000),
            ("0.05", 5_000_000),
            ("0.00000001", 1),
            ("-1.25", -125_000_000),
            ("0.50000000", 50_000_000),
        ],
    )
    def test_from_str(self, text: str, raw: int) -> None:
        assert Dec.from_str(text).raw == raw

    @pytest.mark.parametrize("text", ["", ".5", "1.", "0.000000001", "1e-2", "abc", "+1"])
    def test_from_str_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid decimal string"):
            Dec.from_str(text)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Dec.with_prec(5, 1), "0.50000000"),
            (Dec.from_int(20), "20.00000000"),
            (Dec.from_raw(-1), "-0.00000001"),
            (Dec.zero(), "0.00000000"),
        ],
    )
    def test_str(self, value: Dec, expected: str) -> None:
        assert str(value) == expected

    def test_repr(self) -> None:
        assert repr(Dec.with_prec(5, 1)) == "Dec('0.50000000')"

    @given(st.integers(min_value=INT64_MIN + 1, max_value=INT64_MAX))
    def test_str_parses_back(self, raw: int) -> None:
        value = Dec.from_raw(raw)
        assert Dec.from_str(str(value)) == value


class TestArithmetic:
    """Tests for division and truncating multiplication."""

    def test_quo_exact(self) -> None:
        """1/20 = 0.05 and 1/100 = 0.01 exactly."""
        assert Dec.one().quo(Dec.from_int(20)) == Dec.from_str("0.05")
        assert Dec.one().quo(Dec.from_int(100)) == Dec.from_str("0.01")

    def test_quo_rounds_last_digit(self) -> None:
        """1/3 rounds down and 2/3 rounds up at the 8th digit."""
        assert Dec.one().quo(Dec.from_int(3)) == Dec.from_str("0.33333333")
        assert Dec.from_int(2).quo(Dec.from_int(3)) == Dec.from_str("0.66666667")

    def test_quo_half_rounds_to_even(self) -> None:
        """An exact half at the last digit goes to the even neighbour."""
        # 0.00000001 / 2 = 0.000000005 -> 0.00000000 (even)
        assert Dec.from_raw(1).quo(Dec.from_int(2)) == Dec.zero()
        # 0.00000003 / 2 = 0.000000015 -> 0.00000002 (even)
        assert Dec.from_raw(3).quo(Dec.from_int(2)) == Dec.from_raw(2)

    def test_quo_negative(self) -> None:
        assert Dec.from_int(-1).quo(Dec.from_int(4)) == Dec.from_str("-0.25")

    def test_quo_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Dec.one().quo(Dec.zero())

    @pytest.mark.parametrize(
        "fraction, n, expected",
        [
            ("0.5", 100, 50),
            ("0.99", 3, 2),
            ("1", 7, 7),
            ("0", 1000, 0),
            ("0.33333333", 3, 0),
            ("-0.5", 3, -1),
        ],
    )
    def test_mul_int_truncate(self, fraction: str, n: int, expected: int) -> None:
        """The fractional part is dropped toward zero, never rounded."""
        assert Dec.from_str(fraction).mul_int_truncate(n) == expected


class TestComparison:
    def test_ordering(self) -> None:
        assert Dec.zero() < Dec.with_prec(5, 1) < Dec.one()
        assert Dec.one() >= Dec.one()

    def test_not_equal_to_int(self) -> None:
        """A decimal never equals its raw integer."""
        assert Dec.one() != 10**8
        assert Dec.one() != 1

    def test_hash_matches_equality(self) -> None:
        assert hash(Dec.from_str("0.5")) == hash(Dec.with_prec(5, 1))
        assert len({Dec.from_str("0.5"), Dec.with_prec(5, 1)}) == 1


class TestCodec:
    def test_encode_bytes(self) -> None:
        assert Dec.with_prec(5, 1).encode_bytes() == (50_000_000).to_bytes(8, "little")

    @given(st.integers(min_value=INT64_MIN, max_value=INT64_MAX))
    def test_decode_inverts_encode(self, raw: int) -> None:
        value = Dec.from_raw(raw)
        assert Dec.decode_bytes(value.encode_bytes()) == value

    def test_decode_wrong_length(self) -> None:
        with pytest.raises(ParamDecodeError, match="Failed to decode Dec"):
            Dec.decode_bytes(b"\x00" * 4)


class TestPydantic:
    def test_python_mode_accepts_dec_only(self) -> None:
        model = create_model("Model", value=(Dec, ...))
        assert model(value=Dec.one()).value == Dec.one()  # type: ignore[attr-defined]
        with pytest.raises(ValidationError):
            model(value="0.5")

    def test_json_uses_decimal_string(self) -> None:
        model = create_model("Model", value=(Dec, ...))
        instance: Any = model(value=Dec.with_prec(5, 1))
        assert instance.model_dump_json() == '{"value":"0.50000000"}'

        restored: Any = model.model_validate_json('{"value":"0.05"}')
        assert restored.value == Dec.from_str("0.05")

    def test_json_rejects_malformed_string(self) -> None:
        model = create_model("Model", value=(Dec, ...))
        with pytest.raises(ValidationError):
            model.model_validate_json('{"value":"half"}')

    def test_json_rejects_out_of_range_string(self) -> None:
        """Overflow of the raw value is reported as a validation error."""
        model = create_model("Model", value=(Dec, ...))
        with pytest.raises(ValidationError, match="out of range for Dec"):
            model.model_validate_json('{"value":"999999999999.5"}')


class TestCopying:
    """Immutable decimals still copy and pickle."""

    def test_copy_returns_same_value(self) -> None:
        value = Dec.with_prec(5, 1)
        assert copy.copy(value) is value

    def test_deepcopy_returns_same_value(self) -> None:
        value = Dec.with_prec(5, 1)
        assert copy.deepcopy(value) is value
        assert copy.deepcopy({"fraction": value}) == {"fraction": value}

    def test_pickle_round_trip(self) -> None:
        value = Dec.from_str("-0.25")
        restored = pickle.loads(pickle.dumps(value))

        assert type(restored) is Dec
        assert restored == value
