"""Tests for values derived from stored slashing parameters."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ledger_params.subspecs.slashing import min_signed_per_window
from ledger_params.types import INT64_MAX, Dec, Int64, ParamValueError


@pytest.mark.parametrize(
    "window, fraction, expected",
    [
        (100, "0.5", 50),
        (3, "0.99", 2),
        (10_000, "0.05", 500),
        (7, "0", 0),
        (7, "1", 7),
        (1, "0.99999999", 0),
        (3, "0.33333333", 0),
        (3, "0.33333334", 1),
    ],
)
def test_truncates_toward_zero(window: int, fraction: str, expected: int) -> None:
    assert min_signed_per_window(Int64(window), Dec.from_str(fraction)) == expected


@pytest.mark.parametrize("window", [0, -1, -100])
def test_rejects_non_positive_window(window: int) -> None:
    with pytest.raises(ParamValueError, match="signed_blocks_window"):
        min_signed_per_window(Int64(window), Dec.from_str("0.5"))


@pytest.mark.parametrize("fraction", ["-0.00000001", "1.00000001", "2"])
def test_rejects_fraction_outside_unit_interval(fraction: str) -> None:
    with pytest.raises(ParamValueError, match="must be within"):
        min_signed_per_window(Int64(100), Dec.from_str(fraction))


def test_large_window_is_exact() -> None:
    """No float rounding creeps in at the top of the int64 range."""
    assert min_signed_per_window(Int64(INT64_MAX), Dec.one()) == INT64_MAX
    assert min_signed_per_window(Int64(INT64_MAX), Dec.with_prec(5, 1)) == INT64_MAX // 2


@given(
    window=st.integers(min_value=1, max_value=INT64_MAX),
    raw=st.integers(min_value=0, max_value=Dec.ONE_RAW),
)
def test_result_stays_within_window(window: int, raw: int) -> None:
    result = min_signed_per_window(Int64(window), Dec.from_raw(raw))

    assert 0 <= result <= window
    # Truncation: the result never exceeds the exact product.
    assert result * Dec.ONE_RAW <= window * raw < (result + 1) * Dec.ONE_RAW


@given(
    window=st.integers(min_value=1, max_value=10**12),
    low=st.integers(min_value=0, max_value=Dec.ONE_RAW),
    high=st.integers(min_value=0, max_value=Dec.ONE_RAW),
)
def test_monotonic_in_fraction(window: int, low: int, high: int) -> None:
    low, high = sorted((low, high))
    assert min_signed_per_window(Int64(window), Dec.from_raw(low)) <= min_signed_per_window(
        Int64(window), Dec.from_raw(high)
    )
