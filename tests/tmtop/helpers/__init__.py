"""Test helpers for tmtop unit tests."""

from __future__ import annotations

from .builders import make_row, make_validator, make_validators
from .mocks import RecordingResolver, json_transport, status_transport

__all__ = [
    "RecordingResolver",
    "json_transport",
    "make_row",
    "make_validator",
    "make_validators",
    "status_transport",
]
