"""
Slashing Parameter Configuration

This file defines the subspace name and the genesis values of the
slashing module's governance-tunable parameters.
"""

from typing_extensions import Final

from ledger_params.types import Dec, Duration, Int64, Text

DEFAULT_PARAMSPACE: Final = "slashing"
"""Namespace of the slashing parameters in the shared store."""

# --- Evidence and Unbonding ---

DEFAULT_MAX_EVIDENCE_AGE: Final = Duration.from_seconds(60 * 2)
"""
Maximum age of submitted evidence.

Two minutes suits short-lived test networks; a long-running network
would use three weeks (60 * 60 * 24 * 7 * 3 seconds).
"""

DEFAULT_DOUBLE_SIGN_UNBOND_DURATION: Final = Duration.from_seconds(60 * 5)
"""How long a double-signing validator stays jailed before unbonding."""

DEFAULT_DOWNTIME_UNBOND_DURATION: Final = Duration.from_seconds(60 * 10)
"""How long a validator jailed for downtime stays jailed before unbonding."""

# --- Liveness ---

DEFAULT_SIGNED_BLOCKS_WINDOW: Final = Int64(100)
"""Length of the sliding window of blocks over which liveness is judged."""

DEFAULT_MIN_SIGNED_PER_WINDOW: Final = Dec.with_prec(5, 1)
"""Fraction of the window a validator must sign: 50%."""

# --- Penalties and Rewards ---

DEFAULT_SLASH_FRACTION_DOUBLE_SIGN: Final = Dec.one().quo(Dec.from_int(20))
"""Stake fraction forfeited for double signing: 5%."""

DEFAULT_SLASH_FRACTION_DOWNTIME: Final = Dec.one().quo(Dec.from_int(100))
"""Stake fraction forfeited for downtime: 1%."""

DEFAULT_SLASH_AMOUNT: Final = Int64(100 * 10**8)
"""Fixed amount slashed per fault, in base units (100 tokens at 8 decimals)."""

DEFAULT_SUBMITTER_REWARD: Final = Int64(10 * 10**8)
"""Reward paid to the evidence submitter, in base units (10 tokens)."""

# --- Cross-chain ---

DEFAULT_BSC_SIDE_CHAIN_ID: Final = Text("bsc")
"""Identifier of the side chain whose validators this module slashes."""
