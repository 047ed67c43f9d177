"""
Metrics module for observability.

Provides counters and gauges for tracking round aggregates and name resolution.
Exposes metrics in Prometheus text format.
"""

from .registry import (
    REGISTRY,
    alias_lookups,
    generate_metrics,
    precommitted_percent,
    prevoted_percent,
    record_round,
    total_voting_power_gauge,
)

__all__ = [
    "REGISTRY",
    "alias_lookups",
    "generate_metrics",
    "precommitted_percent",
    "prevoted_percent",
    "record_round",
    "total_voting_power_gauge",
]
