"""Global state management for conncheck."""

from conncheck.config import Settings
from conncheck.services.checker import ConnectionChecker

# Global state (initialized on first access)
_checker: ConnectionChecker | None = None


def get_checker() -> ConnectionChecker:
    """Get or create the process-wide checker.

    Built from CONNCHECK_* environment settings on first access; every
    later call returns the same instance.
    """
    global _checker
    if _checker is None:
        _checker = ConnectionChecker.from_settings(Settings.from_env())
    return _checker


def set_checker(checker: ConnectionChecker) -> None:
    """Set the global checker instance.

    Allows tests or host applications to inject a custom checker.

    Args:
        checker: ConnectionChecker instance to use globally.
    """
    global _checker
    _checker = checker


def reset_state() -> None:
    """Reset global state for testing.

    Clears the singleton so the next get_checker() builds a fresh one.
    Should only be used in test fixtures.
    """
    global _checker
    _checker = None
