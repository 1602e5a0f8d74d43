"""
Slashing parameter keeper.

The keeper is the read surface that slashing logic (downtime tracking,
evidence handling, unbonding) calls, plus the single write path used by
governance. Each accessor has a fixed return type and reads the store on
every call; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from typing import Any, cast

from ledger_params.subspecs.params import Subspace
from ledger_params.subspecs.storage import KVStore
from ledger_params.types import Dec, Duration, Int64, Text

from . import derivation
from .config import DEFAULT_PARAMSPACE
from .keys import (
    KEY_BSC_SIDE_CHAIN_ID,
    KEY_DOUBLE_SIGN_UNBOND_DURATION,
    KEY_DOWNTIME_UNBOND_DURATION,
    KEY_MAX_EVIDENCE_AGE,
    KEY_MIN_SIGNED_PER_WINDOW,
    KEY_SIGNED_BLOCKS_WINDOW,
    KEY_SLASH_AMOUNT,
    KEY_SLASH_FRACTION_DOUBLE_SIGN,
    KEY_SLASH_FRACTION_DOWNTIME,
    KEY_SUBMITTER_REWARD,
)
from .params import PARAM_TABLE, SlashingParams

logger = logging.getLogger(__name__)


class SlashingKeeper:
    """
    Typed access to the slashing parameters of one store.

    The host serializes state transitions, so the keeper takes no locks.
    A host that runs transitions concurrently must guard `set_params` and
    `update_params` itself.
    """

    def __init__(self, subspace: Subspace) -> None:
        """
        Wrap a subspace bound to the slashing parameter table.

        Raises:
            ValueError: If the subspace uses a different table.
        """
        if subspace.table is not PARAM_TABLE:
            raise ValueError(f"Subspace {subspace.name!r} is not keyed by the slashing table")
        self._subspace = subspace

    @classmethod
    def from_store(cls, store: KVStore, name: str = DEFAULT_PARAMSPACE) -> SlashingKeeper:
        """Create a keeper over the slashing namespace of `store`."""
        return cls(Subspace(store, name, PARAM_TABLE))

    @property
    def subspace(self) -> Subspace:
        return self._subspace

    # -------------------------------------------------------------------------
    # Evidence and Unbonding
    # -------------------------------------------------------------------------

    def max_evidence_age(self) -> Duration:
        """Maximum age of evidence that can still be submitted."""
        return cast(Duration, self._subspace.get(KEY_MAX_EVIDENCE_AGE))

    def double_sign_unbond_duration(self) -> Duration:
        return cast(Duration, self._subspace.get(KEY_DOUBLE_SIGN_UNBOND_DURATION))

    def downtime_unbond_duration(self) -> Duration:
        return cast(Duration, self._subspace.get(KEY_DOWNTIME_UNBOND_DURATION))

    # -------------------------------------------------------------------------
    # Liveness
    # -------------------------------------------------------------------------

    def signed_blocks_window(self) -> Int64:
        """Sliding window, in blocks, for downtime slashing."""
        return cast(Int64, self._subspace.get(KEY_SIGNED_BLOCKS_WINDOW))

    def min_signed_fraction(self) -> Dec:
        """The stored fraction of the window that must be signed."""
        return cast(Dec, self._subspace.get(KEY_MIN_SIGNED_PER_WINDOW))

    def min_signed_per_window(self) -> int:
        """
        Downtime threshold: blocks that must be signed per window.

        Both inputs are read fresh, so the result always matches the
        parameters currently in the store.
        """
        return derivation.min_signed_per_window(
            self.signed_blocks_window(), self.min_signed_fraction()
        )

    # -------------------------------------------------------------------------
    # Penalties and Rewards
    # -------------------------------------------------------------------------

    def slash_fraction_double_sign(self) -> Dec:
        return cast(Dec, self._subspace.get(KEY_SLASH_FRACTION_DOUBLE_SIGN))

    def slash_fraction_downtime(self) -> Dec:
        return cast(Dec, self._subspace.get(KEY_SLASH_FRACTION_DOWNTIME))

    def slash_amount(self) -> Int64:
        return cast(Int64, self._subspace.get(KEY_SLASH_AMOUNT))

    def submitter_reward(self) -> Int64:
        return cast(Int64, self._subspace.get(KEY_SUBMITTER_REWARD))

    def bsc_side_chain_id(self) -> Text:
        return cast(Text, self._subspace.get(KEY_BSC_SIDE_CHAIN_ID))

    # -------------------------------------------------------------------------
    # Whole-set access
    # -------------------------------------------------------------------------

    def params(self) -> SlashingParams:
        """Read every slashing parameter as one validated set."""
        return self._subspace.get_param_set(SlashingParams)

    def set_params(self, params: SlashingParams) -> None:
        """
        Replace every slashing parameter at once.

        This is the governance write path and the genesis initializer.
        """
        self._subspace.set_param_set(params)

    def update_params(self, **changes: Any) -> SlashingParams:
        """
        Change some parameters and keep the rest.

        The current set is read, the changes are applied, and the result is
        validated and written as a complete set, so a partial update goes
        through the same checks and the same atomic write as a full one.

        Args:
            **changes: New values, by field name.

        Returns:
            The parameter set now in the store.

        Raises:
            pydantic.ValidationError: If a change names an unknown field or
                has the wrong type.
            ParamValueError: If the updated set violates a domain check.
        """
        updated = self.params().copy(**changes)
        self.set_params(updated)

        logger.info("Updated slashing parameters: %s", ", ".join(sorted(changes)))
        return updated
