"""
Metric registry using prometheus_client.

Provides round-level gauges and alias lookup counters for the monitor.
Exposes metrics in Prometheus text format.
"""

from __future__ import annotations

import logging

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    generate_latest,
)

from tmtop.aggregator import (
    total_voting_power,
    total_voting_power_precommitted_percent,
    total_voting_power_prevoted_percent,
)
from tmtop.types import DivisionByZeroError, Validators

logger = logging.getLogger(__name__)

# Create a dedicated registry for tmtop metrics.
#
# Using a dedicated registry avoids pollution from default Python process metrics.
REGISTRY = CollectorRegistry()

# -----------------------------------------------------------------------------
# Round Aggregates
# -----------------------------------------------------------------------------

total_voting_power_gauge = Gauge(
    "tmtop_total_voting_power",
    "Total voting power of the current validator set",
    registry=REGISTRY,
)

prevoted_percent = Gauge(
    "tmtop_prevoted_percent",
    "Share of voting power that prevoted in the current round",
    registry=REGISTRY,
)

precommitted_percent = Gauge(
    "tmtop_precommitted_percent",
    "Share of voting power that precommitted in the current round",
    registry=REGISTRY,
)

# -----------------------------------------------------------------------------
# Name Resolution
# -----------------------------------------------------------------------------

alias_lookups = Counter(
    "tmtop_alias_lookups_total",
    "Genesis alias lookups by outcome",
    labelnames=("outcome",),
    registry=REGISTRY,
)


def record_round(validators: Validators, count_disagreeing: bool) -> None:
    """
    Publish the aggregates of one polling cycle.

    Percentage gauges keep their previous value when the total voting power
    is zero, since the percentage is undefined.
    """
    total_voting_power_gauge.set(total_voting_power(validators))
    try:
        prevoted_percent.set(
            float(total_voting_power_prevoted_percent(validators, count_disagreeing))
        )
        precommitted_percent.set(
            float(total_voting_power_precommitted_percent(validators, count_disagreeing))
        )
    except DivisionByZeroError as e:
        logger.debug("Skipping percentage gauges: %s", e)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics output.

    Returns:
        Prometheus text format output as bytes.
    """
    return generate_latest(REGISTRY)
