"""Services for conncheck."""

from conncheck.services.checker import ConnectionChecker
from conncheck.services.probe import check_connection, describe_error, probe_target
from conncheck.services.state import get_checker, reset_state, set_checker

__all__ = [
    "ConnectionChecker",
    "check_connection",
    "describe_error",
    "get_checker",
    "probe_target",
    "reset_state",
    "set_checker",
]
