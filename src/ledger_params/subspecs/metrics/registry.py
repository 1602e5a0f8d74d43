"""
Metric registry using prometheus_client.

Provides pre-defined metrics for parameter store traffic.
Exposes metrics in Prometheus text format.
"""

from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    generate_latest,
)

# Create a dedicated registry for ledger parameter metrics.
#
# Using a dedicated registry avoids pollution from default Python process metrics.
REGISTRY = CollectorRegistry()

# -----------------------------------------------------------------------------
# Parameter Access
# -----------------------------------------------------------------------------

param_reads = Counter(
    "ledger_param_reads_total",
    "Parameter values read from the store",
    ["subspace"],
    registry=REGISTRY,
)

param_writes = Counter(
    "ledger_param_writes_total",
    "Parameter values written to the store",
    ["subspace"],
    registry=REGISTRY,
)

param_set_commits = Counter(
    "ledger_param_set_commits_total",
    "Full parameter sets committed to the store",
    ["subspace"],
    registry=REGISTRY,
)

# -----------------------------------------------------------------------------
# Failures
# -----------------------------------------------------------------------------

param_decode_failures = Counter(
    "ledger_param_decode_failures_total",
    "Stored parameter values that failed to decode",
    ["subspace"],
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics output.

    Returns:
        Prometheus text format output as bytes.
    """
    return generate_latest(REGISTRY)
