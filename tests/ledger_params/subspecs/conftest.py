"""
Shared pytest fixtures for subspecs tests.

Every test gets its own in-memory store, so no state leaks between tests.
"""

from __future__ import annotations

import pytest

from ledger_params.subspecs.params import Subspace
from ledger_params.subspecs.slashing import PARAM_TABLE, SlashingKeeper, default_params
from ledger_params.subspecs.storage import MemoryKVStore


@pytest.fixture
def store() -> MemoryKVStore:
    """Fresh, empty in-memory store."""
    return MemoryKVStore()


@pytest.fixture
def subspace(store: MemoryKVStore) -> Subspace:
    """Slashing subspace over the empty store."""
    return Subspace(store, "slashing", PARAM_TABLE)


@pytest.fixture
def keeper(subspace: Subspace) -> SlashingKeeper:
    """Keeper with the default parameters installed, as at genesis."""
    keeper = SlashingKeeper(subspace)
    keeper.set_params(default_params())
    return keeper
