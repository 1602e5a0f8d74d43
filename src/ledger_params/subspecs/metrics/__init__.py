"""
Metrics module for observability.

Provides counters for tracking parameter store traffic.
Exposes metrics in Prometheus text format.
"""

from .registry import (
    REGISTRY,
    generate_metrics,
    param_decode_failures,
    param_reads,
    param_set_commits,
    param_writes,
)

__all__ = [
    "REGISTRY",
    "generate_metrics",
    "param_decode_failures",
    "param_reads",
    "param_set_commits",
    "param_writes",
]
