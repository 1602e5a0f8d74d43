"""
Slashing parameter set.

The slashing module tunes how evidence is accepted and how faults are
punished through ten governance-controlled parameters. This file declares
them once: the fields of `SlashingParams`, the table binding each field to
its store key and type, and the canonical genesis values.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator
from typing_extensions import Self

from ledger_params.subspecs.params import ParamDescriptor, ParamSet, ParamTable
from ledger_params.types import Dec, Duration, Int64, ParamValueError, Text

from . import config
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

# -----------------------------------------------------------------------------
# Domain checks
# -----------------------------------------------------------------------------


def validate_fraction(name: str, value: Any) -> None:
    """A fraction must lie in [0, 1]."""
    if value < Dec.zero() or value > Dec.one():
        raise ParamValueError(name, value, "must be within [0, 1]")


def validate_non_negative(name: str, value: Any) -> None:
    """Durations and amounts cannot be negative."""
    if value < 0:
        raise ParamValueError(name, value, "must not be negative")


def validate_positive(name: str, value: Any) -> None:
    if value <= 0:
        raise ParamValueError(name, value, "must be positive")


def validate_identifier(name: str, value: Any) -> None:
    if not value:
        raise ParamValueError(name, repr(value), "must not be empty")


# -----------------------------------------------------------------------------
# Parameter set
# -----------------------------------------------------------------------------


class SlashingParams(ParamSet):
    """
    Every slashing parameter, with the JSON names used by genesis files
    and governance proposals.
    """

    max_evidence_age: Duration = Field(alias="max-evidence-age")
    """Evidence older than this is rejected."""

    signed_blocks_window: Int64 = Field(alias="signed-blocks-window")
    """Number of recent blocks over which signing participation is judged."""

    min_signed_per_window: Dec = Field(alias="min-signed-per-window")
    """Fraction of `signed_blocks_window` a validator must sign."""

    double_sign_unbond_duration: Duration = Field(alias="double-sign-unbond-duration")
    """Jail time after a double-sign fault."""

    downtime_unbond_duration: Duration = Field(alias="downtime-unbond-duration")
    """Jail time after a downtime fault."""

    slash_fraction_double_sign: Dec = Field(alias="slash-fraction-double-sign")
    """Stake fraction forfeited for double signing."""

    slash_fraction_downtime: Dec = Field(alias="slash-fraction-downtime")
    """Stake fraction forfeited for downtime."""

    slash_amount: Int64 = Field(alias="slash_amount")
    """Fixed amount slashed per fault, in base units."""

    submitter_reward: Int64 = Field(alias="submitter_reward")
    """Amount paid to whoever submits valid evidence, in base units."""

    bsc_side_chain_id: Text = Field(alias="bsc_side_chain_id")
    """Side chain whose validators are slashed."""

    @model_validator(mode="after")
    def check_domains(self) -> Self:
        """Run the domain check of every registered parameter."""
        for descriptor in PARAM_TABLE:
            if descriptor.validator is not None:
                descriptor.validator(descriptor.field_name, getattr(self, descriptor.field_name))
        return self

    @classmethod
    def param_table(cls) -> ParamTable:
        return PARAM_TABLE


def param_table() -> ParamTable:
    """
    Build the key table of the slashing parameters.

    The table lists every field of `SlashingParams` exactly once, in the
    order a full set is written.

    Raises:
        ParamSchemaError: If a key or field is registered twice, or a field
            of `SlashingParams` is left without a key.
    """
    table = ParamTable(
        config.DEFAULT_PARAMSPACE,
        [
            ParamDescriptor(
                KEY_MAX_EVIDENCE_AGE, "max_evidence_age", Duration, validate_non_negative
            ),
            ParamDescriptor(
                KEY_SIGNED_BLOCKS_WINDOW, "signed_blocks_window", Int64, validate_positive
            ),
            ParamDescriptor(
                KEY_MIN_SIGNED_PER_WINDOW, "min_signed_per_window", Dec, validate_fraction
            ),
            ParamDescriptor(
                KEY_DOUBLE_SIGN_UNBOND_DURATION,
                "double_sign_unbond_duration",
                Duration,
                validate_non_negative,
            ),
            ParamDescriptor(
                KEY_DOWNTIME_UNBOND_DURATION,
                "downtime_unbond_duration",
                Duration,
                validate_non_negative,
            ),
            ParamDescriptor(
                KEY_SLASH_FRACTION_DOUBLE_SIGN,
                "slash_fraction_double_sign",
                Dec,
                validate_fraction,
            ),
            ParamDescriptor(
                KEY_SLASH_FRACTION_DOWNTIME, "slash_fraction_downtime", Dec, validate_fraction
            ),
            ParamDescriptor(KEY_SLASH_AMOUNT, "slash_amount", Int64, validate_non_negative),
            ParamDescriptor(
                KEY_SUBMITTER_REWARD, "submitter_reward", Int64, validate_non_negative
            ),
            ParamDescriptor(KEY_BSC_SIDE_CHAIN_ID, "bsc_side_chain_id", Text, validate_identifier),
        ],
    )
    table.check_covers(SlashingParams)
    return table


# Built at import: a schema defect stops the module from loading at all.
PARAM_TABLE = param_table()


def default_params() -> SlashingParams:
    """Return the canonical genesis parameter set."""
    return SlashingParams(
        max_evidence_age=config.DEFAULT_MAX_EVIDENCE_AGE,
        signed_blocks_window=config.DEFAULT_SIGNED_BLOCKS_WINDOW,
        min_signed_per_window=config.DEFAULT_MIN_SIGNED_PER_WINDOW,
        double_sign_unbond_duration=config.DEFAULT_DOUBLE_SIGN_UNBOND_DURATION,
        downtime_unbond_duration=config.DEFAULT_DOWNTIME_UNBOND_DURATION,
        slash_fraction_double_sign=config.DEFAULT_SLASH_FRACTION_DOUBLE_SIGN,
        slash_fraction_downtime=config.DEFAULT_SLASH_FRACTION_DOWNTIME,
        slash_amount=config.DEFAULT_SLASH_AMOUNT,
        submitter_reward=config.DEFAULT_SUBMITTER_REWARD,
        bsc_side_chain_id=config.DEFAULT_BSC_SIDE_CHAIN_ID,
    )
