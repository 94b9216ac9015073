"""Utilities for conncheck."""

from conncheck.utils.console import ColorfulFormatter, configure_logging
from conncheck.utils.parser import parse_target

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "parse_target",
]
