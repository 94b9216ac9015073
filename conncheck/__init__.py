"""conncheck - check for a working internet connection.

Opens concurrent TCP connections to a list of well-known endpoints
(public DNS resolvers by default); the host is online if any succeeds.

Example:
    checker = ConnectionChecker()
    if await checker.has_connection():
        ...
    print(checker.last_try_log)
"""

import logging

from conncheck.config import DEFAULT_ADDRESSES, Settings
from conncheck.models import (
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    ConnectivityReport,
    ProbeOutcome,
    ProbeTarget,
)
from conncheck.services import (
    ConnectionChecker,
    check_connection,
    get_checker,
    probe_target,
    reset_state,
    set_checker,
)
from conncheck.utils import configure_logging, parse_target

__version__ = "0.1.0"

# Library: leave handler configuration to the host application
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConnectionChecker",
    "ConnectivityReport",
    "DEFAULT_ADDRESSES",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT",
    "ProbeOutcome",
    "ProbeTarget",
    "Settings",
    "check_connection",
    "configure_logging",
    "get_checker",
    "parse_target",
    "probe_target",
    "reset_state",
    "set_checker",
]
