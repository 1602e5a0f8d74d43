"""The slashing module's governance parameters."""

from .config import DEFAULT_PARAMSPACE
from .derivation import min_signed_per_window
from .keeper import SlashingKeeper
from .params import PARAM_TABLE, SlashingParams, default_params, param_table

__all__ = [
    "DEFAULT_PARAMSPACE",
    "PARAM_TABLE",
    "SlashingKeeper",
    "SlashingParams",
    "default_params",
    "min_signed_per_window",
    "param_table",
]
