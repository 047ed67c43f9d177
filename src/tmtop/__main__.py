"""
tmtop CLI entry point.

Render one consensus round from a validator snapshot: the prevote and
precommit agreement, followed by one status line per validator.

Usage::

    python -m tmtop --snapshot round.yaml
    python -m tmtop --snapshot round.yaml --rpc-host http://localhost:26657
    python -m tmtop --snapshot round.yaml --count-disagreeing --no-alias-lookup

Options:
    --snapshot            Path to validator snapshot YAML file (required)
    --rpc-host            Node RPC URL used to label the output with network and version
    --alias-url           Genesis alias document URL (default: TMTOP_GENESIS_ALIAS_URL)
    --no-alias-lookup     Show raw addresses for validators without a chain identity
    --count-disagreeing   Count nil votes toward the agreement percentages
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Callable
from decimal import Decimal
from pathlib import Path
from typing import TextIO

from tmtop.aggregator import (
    total_voting_power,
    total_voting_power_precommitted_percent,
    total_voting_power_prevoted_percent,
)
from tmtop.aliases import GenesisAliasResolver
from tmtop.config import GENESIS_ALIAS_URL
from tmtop.formatter import StatusLineFormatter
from tmtop.metrics import record_round
from tmtop.rpc import fetch_node_status
from tmtop.snapshot import load_snapshot
from tmtop.types import (
    DivisionByZeroError,
    NodeStatusError,
    SnapshotError,
    TendermintNodeInfo,
    Validators,
    ValidatorsWithInfo,
)

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
"""Shown in place of a percentage that is undefined for zero voting power."""


def percent_label(
    compute: Callable[[Validators, bool], Decimal],
    validators: Validators,
    count_disagreeing: bool,
) -> str:
    """Render an agreement percentage, or N/A when it is undefined."""
    try:
        return f"{compute(validators, count_disagreeing):.2f}%"
    except DivisionByZeroError as e:
        logger.debug("%s", e.message)
        return NOT_AVAILABLE


async def render_round(
    rows: ValidatorsWithInfo,
    formatter: StatusLineFormatter,
    count_disagreeing: bool,
    node_info: TendermintNodeInfo | None = None,
) -> list[str]:
    """
    Render the round summary and the validator table.

    Args:
        rows: Validators of the round with their optional chain identity.
        formatter: Formatter for the validator status lines.
        count_disagreeing: Count nil votes toward the agreement percentages.
        node_info: Identity of the queried node, if known.

    Returns:
        Output lines, without trailing newlines.
    """
    validators = tuple(row.validator for row in rows)
    record_round(validators, count_disagreeing)

    lines: list[str] = []
    if node_info is not None:
        lines.append(f"{node_info.network} {node_info.version}")

    if total_voting_power(validators) == 0:
        logger.warning("Round has zero total voting power, agreement is not available")

    prevoted = percent_label(total_voting_power_prevoted_percent, validators, count_disagreeing)
    precommitted = percent_label(
        total_voting_power_precommitted_percent, validators, count_disagreeing
    )
    lines.append(f"Prevoted: {prevoted}  Precommitted: {precommitted}")
    lines.extend(await formatter.format_all(rows))
    return lines


async def run(
    snapshot_path: Path,
    rpc_host: str | None,
    alias_url: str,
    alias_lookup: bool,
    count_disagreeing: bool,
) -> int:
    """
    Load a snapshot, render it and print it to stdout.

    Returns:
        Process exit status.
    """
    try:
        rows = load_snapshot(snapshot_path)
    except SnapshotError as e:
        logger.error("%s", e.message)
        return 1

    node_info = None
    if rpc_host is not None:
        try:
            node_info = await fetch_node_status(rpc_host)
        except NodeStatusError as e:
            logger.error("Node status unavailable: %s", e.message)

    resolver = GenesisAliasResolver(alias_url) if alias_lookup else None
    formatter = StatusLineFormatter(alias_resolver=resolver)

    for line in await render_round(rows, formatter, count_disagreeing, node_info):
        print(line)
    return 0


LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

QUIET_LOGGERS = ("httpx", "httpcore")
"""Third-party loggers that report every alias and status request at INFO."""


class ColoredFormatter(logging.Formatter):
    """
    Log lines tinted by severity.

    Only the message line is tinted. Tracebacks and stack info are appended
    uncolored by the base class.
    """

    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[2m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[1;31m",
    }

    def __init__(self) -> None:
        super().__init__(LOG_FORMAT, datefmt=LOG_DATEFMT)

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        return line if color is None else f"{color}{line}{self.RESET}"


def setup_logging(
    verbose: bool = False,
    color: bool | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """
    Attach a log handler to the root logger.

    Logs go to stderr by default, so they never interleave with the table
    printed on stdout. Color defaults to on only for terminals, and stays off
    when `NO_COLOR` is set.

    Returns:
        The installed handler.
    """
    stream = stream if stream is not None else sys.stderr
    if color is None:
        color = stream.isatty() and "NO_COLOR" not in os.environ

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        ColoredFormatter() if color else logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.addHandler(handler)

    if not verbose:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    return handler


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Consensus round status for Tendermint-based chains",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--snapshot",
        required=True,
        type=Path,
        help="Path to validator snapshot YAML file",
    )
    parser.add_argument(
        "--rpc-host",
        type=str,
        default=None,
        help="Node RPC URL for the network and version header (e.g., http://localhost:26657)",
    )
    parser.add_argument(
        "--alias-url",
        type=str,
        default=GENESIS_ALIAS_URL,
        help="Genesis alias document URL",
    )
    parser.add_argument(
        "--no-alias-lookup",
        action="store_false",
        dest="alias_lookup",
        help="Do not look up genesis aliases for validators without a chain identity",
    )
    parser.add_argument(
        "--count-disagreeing",
        action="store_true",
        help="Count nil votes toward the agreement percentages",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output (color is only used on terminals)",
    )

    args = parser.parse_args()

    setup_logging(args.verbose, color=False if args.no_color else None)

    try:
        status = asyncio.run(
            run(
                args.snapshot,
                args.rpc_host,
                args.alias_url,
                args.alias_lookup,
                args.count_disagreeing,
            )
        )
    except KeyboardInterrupt:
        logger.info("Interrupted")
        status = 130

    sys.exit(status)


if __name__ == "__main__":
    main()
