"""Data models for conncheck."""

from conncheck.models.report import ConnectivityReport, ProbeOutcome
from conncheck.models.target import DEFAULT_PORT, DEFAULT_TIMEOUT, ProbeTarget

__all__ = [
    "ConnectivityReport",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT",
    "ProbeOutcome",
    "ProbeTarget",
]
