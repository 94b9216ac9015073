"""Connectivity checker holding the probe target registry."""

import asyncio
import logging

from conncheck.config import DEFAULT_ADDRESSES, Settings
from conncheck.models import ConnectivityReport, ProbeTarget
from conncheck.services.probe import check_connection

logger = logging.getLogger(__name__)


class ConnectionChecker:
    """Checks for an internet connection by probing a list of addresses.

    The address list is read-only for the duration of a check: each check
    takes a snapshot when it starts, so replacing ``addresses`` only affects
    later checks. Mutating the list in place while a check is running is
    unsupported.

    ``last_try_log`` holds the trace of the most recent check only. It is
    cleared when a check starts and overwritten when it finishes; with
    overlapping checks the last one to finish wins.
    """

    def __init__(self, addresses: list[ProbeTarget] | None = None) -> None:
        """Initialize checker.

        Args:
            addresses: Probe targets, defaults to DEFAULT_ADDRESSES
        """
        self._addresses: list[ProbeTarget] = list(
            DEFAULT_ADDRESSES if addresses is None else addresses
        )
        self._last_report: ConnectivityReport | None = None
        self._last_try_log = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionChecker":
        """Create a checker with the targets configured in settings."""
        return cls(addresses=settings.targets())

    @property
    def addresses(self) -> list[ProbeTarget]:
        """Probe targets used by the next check."""
        return self._addresses

    @addresses.setter
    def addresses(self, value: list[ProbeTarget]) -> None:
        self._addresses = list(value)

    @property
    def last_try_log(self) -> str:
        """Trace text of the most recent check (empty while one is starting)."""
        return self._last_try_log

    @property
    def last_report(self) -> ConnectivityReport | None:
        """Report of the most recent completed check.

        None before the first check and while a check is in flight, matching
        the cleared last_try_log.
        """
        return self._last_report

    async def check(self) -> ConnectivityReport:
        """Probe every configured address concurrently.

        Returns:
            ConnectivityReport for this check
        """
        self._last_try_log = ""
        self._last_report = None
        snapshot = tuple(self._addresses)
        logger.debug("Starting connectivity check against %d targets", len(snapshot))

        report = await check_connection(snapshot)

        self._last_report = report
        self._last_try_log = report.trace
        return report

    async def has_connection(self) -> bool:
        """Return True if at least one address is reachable."""
        report = await self.check()
        return report.online

    def has_connection_blocking(self) -> bool:
        """Run has_connection() to completion from synchronous code.

        Raises:
            RuntimeError: If called from inside a running event loop
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # No loop in this thread
            pass
        else:
            raise RuntimeError(
                "has_connection_blocking() cannot run inside an event loop; "
                "await has_connection() instead"
            )
        return asyncio.run(self.has_connection())
