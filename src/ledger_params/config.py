"""
Global configuration for the ledger parameter registry.

`LEDGER_ENV` selects how strictly stored parameters are read back:

- `prod`: a decoded value is returned as soon as its bytes decode.
- `test`: every `Subspace` read also re-runs the key's type and domain
  check, so out-of-domain state written behind the registry fails loudly.
"""

import os

_SUPPORTED_LEDGER_ENVS: list[str] = ["prod", "test"]

LEDGER_ENV = os.environ.get("LEDGER_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if LEDGER_ENV not in _SUPPORTED_LEDGER_ENVS:
    raise ValueError(
        f"Invalid LEDGER_ENV environment variable: '{LEDGER_ENV}'. "
        f"Supported values: {_SUPPORTED_LEDGER_ENVS}"
    )
