"""
Store keys of the slashing parameters.

The byte values are part of the persisted state layout and must never change.
"""

from typing_extensions import Final

from ledger_params.subspecs.params import ParamKey

KEY_MAX_EVIDENCE_AGE: Final = ParamKey(b"MaxEvidenceAge")
KEY_SIGNED_BLOCKS_WINDOW: Final = ParamKey(b"SignedBlocksWindow")
KEY_MIN_SIGNED_PER_WINDOW: Final = ParamKey(b"MinSignedPerWindow")
KEY_DOUBLE_SIGN_UNBOND_DURATION: Final = ParamKey(b"DoubleSignUnbondDuration")
KEY_DOWNTIME_UNBOND_DURATION: Final = ParamKey(b"DowntimeUnbondDuration")
KEY_SLASH_FRACTION_DOUBLE_SIGN: Final = ParamKey(b"SlashFractionDoubleSign")
KEY_SLASH_FRACTION_DOWNTIME: Final = ParamKey(b"SlashFractionDowntime")
KEY_SLASH_AMOUNT: Final = ParamKey(b"SlashAmount")
KEY_SUBMITTER_REWARD: Final = ParamKey(b"SubmitterReward")
KEY_BSC_SIDE_CHAIN_ID: Final = ParamKey(b"BscSideChainId")
