"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

from conncheck.config.defaults import DEFAULT_ADDRESSES
from conncheck.models import DEFAULT_PORT, DEFAULT_TIMEOUT, ProbeTarget
from conncheck.utils.parser import parse_target

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Probe targets (raw entries; empty means the default addresses)
    target_entries: list[str] = field(default_factory=list)
    default_port: int = field(default=DEFAULT_PORT)
    timeout: float = field(default=DEFAULT_TIMEOUT)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from CONNCHECK_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            target_entries=cls._get_list("CONNCHECK_TARGETS"),
            default_port=cls._get_port("CONNCHECK_PORT", DEFAULT_PORT),
            timeout=cls._get_float("CONNCHECK_TIMEOUT", DEFAULT_TIMEOUT),
            log_level=os.getenv("CONNCHECK_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("CONNCHECK_LOG_COLORS", True),
        )

    def targets(self) -> list[ProbeTarget]:
        """Build the probe target list.

        Entries that fail to parse are logged and skipped. With no entries
        configured, the default addresses are used with the configured
        port and timeout applied.

        Returns:
            New list of ProbeTarget
        """
        if not self.target_entries:
            return [
                ProbeTarget(t.address, port=self.default_port, timeout=self.timeout)
                for t in DEFAULT_ADDRESSES
            ]

        targets = []
        for entry in self.target_entries:
            try:
                targets.append(parse_target(entry, self.default_port, self.timeout))
            except ValueError as e:
                logger.warning("Skipping invalid target %r: %s", entry, e)
        return targets

    @staticmethod
    def _get_port(key: str, default: int) -> int:
        """Get a TCP port number from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            result = int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default
        if not 0 < result <= 65535:
            logger.warning("Out of range port for %s: %s, using default %d", key, value, default)
            return default
        return result

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Get positive float from environment."""
        value = os.getenv(key)
        if value is None:
            return default

        try:
            result = float(value)
        except ValueError:
            logger.warning("Invalid float for %s: %s, using default %g", key, value, default)
            return default
        if result <= 0:
            logger.warning("Non-positive value for %s: %s, using default %g", key, value, default)
            return default
        return result

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or unrecognized

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        normalized = value.strip().lower()
        if normalized in ("1", "true", "yes", "on"):
            return True
        if normalized in ("0", "false", "no", "off"):
            return False
        logger.warning("Invalid bool for %s: %s, using default %s", key, value, default)
        return default

    @staticmethod
    def _get_list(key: str) -> list[str]:
        """Get comma-separated entries from environment.

        Returns:
            List of stripped, non-empty entries (empty if not set)
        """
        value = os.getenv(key, "").strip()
        if not value:
            return []
        return [item.strip() for item in value.split(",") if item.strip()]
