"""
Values derived from more than one stored parameter.

Derived values are never stored. They are recomputed from the current
parameters on every call, so they cannot drift from them.
"""

from __future__ import annotations

from ledger_params.types import Dec, Int64, ParamValueError


def min_signed_per_window(signed_blocks_window: Int64, min_signed_fraction: Dec) -> int:
    """
    Minimum number of blocks a validator must sign within the window.

    Computes `window * fraction` and truncates toward zero:

        window = 100, fraction = 0.5   ->  50
        window = 3,   fraction = 0.99  ->  2   (2.97, not rounded up)

    Truncation yields the smallest whole number of blocks that is not
    stricter than the configured fraction.

    Args:
        signed_blocks_window: Length of the sliding window, in blocks.
        min_signed_fraction: Required fraction of signed blocks, in [0, 1].

    Returns:
        Required signed-block count, in [0, signed_blocks_window].

    Raises:
        ParamValueError: If the window is not positive or the fraction lies
            outside [0, 1].
    """
    if signed_blocks_window <= 0:
        raise ParamValueError("signed_blocks_window", signed_blocks_window, "must be positive")
    if min_signed_fraction < Dec.zero() or min_signed_fraction > Dec.one():
        raise ParamValueError("min_signed_per_window", min_signed_fraction, "must be within [0, 1]")

    return min_signed_fraction.mul_int_truncate(signed_blocks_window)
