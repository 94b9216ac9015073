"""Concurrent TCP reachability probing."""

import asyncio
import logging
from collections.abc import Iterable

from conncheck.models import ConnectivityReport, ProbeOutcome, ProbeTarget

logger = logging.getLogger(__name__)


def _trying_line(target: ProbeTarget) -> str:
    return (
        f"Trying to ping {target.address}, port: {target.port}, "
        f"with timeout: {target.timeout:g} seconds"
    )


def describe_error(error: Exception, target: ProbeTarget) -> str:
    """Turn a failed connection attempt into a human-readable reason."""
    if isinstance(error, TimeoutError):
        return f"Connection timed out after {target.timeout:g} seconds"
    return str(error) or type(error).__name__


async def probe_target(target: ProbeTarget) -> ProbeOutcome:
    """Attempt one TCP connection to target within its own timeout.

    The connection is closed as soon as it is established. Failures
    (timeout, refused, unreachable, name resolution, malformed address)
    become an unreachable outcome and are never raised.

    Args:
        target: Address, port and timeout to probe.

    Returns:
        ProbeOutcome carrying the attempt's two trace lines.
    """
    trace = [_trying_line(target)]
    logger.debug("Probing %s:%d (timeout=%gs)", target.address, target.port, target.timeout)

    try:
        _, writer = await asyncio.wait_for(
            asyncio.open_connection(target.address, target.port),
            timeout=target.timeout,
        )
    except (TimeoutError, OSError, ValueError) as e:
        reason = describe_error(e, target)
        trace.append(f"{target.address} is unreachable. Reason: {reason}")
        logger.debug("%s:%d is unreachable: %s", target.address, target.port, reason)
        return ProbeOutcome(target=target, reachable=False, reason=reason, trace=tuple(trace))

    try:
        writer.close()
        await writer.wait_closed()
    except OSError as e:
        # Already connected; a reset during close doesn't change the outcome
        logger.debug("Error closing probe connection to %s:%d: %s", target.address, target.port, e)

    trace.append(f"{target.address} is reachable.")
    logger.debug("%s:%d is reachable", target.address, target.port)
    return ProbeOutcome(target=target, reachable=True, trace=tuple(trace))


async def check_connection(targets: Iterable[ProbeTarget]) -> ConnectivityReport:
    """Probe all targets concurrently and aggregate the outcomes.

    Every probe runs to completion (no short-circuit on the first success)
    so the report covers each attempt. Total duration is bounded by the
    largest per-target timeout, not their sum.

    Args:
        targets: Probe targets. Snapshotted on entry.

    Returns:
        ConnectivityReport; online is False for an empty target list.
    """
    snapshot = tuple(targets)
    if not snapshot:
        logger.info("Connectivity check skipped: no targets configured")
        return ConnectivityReport()

    outcomes = await asyncio.gather(*(probe_target(target) for target in snapshot))
    report = ConnectivityReport(outcomes=tuple(outcomes))

    logger.info(
        "Connectivity check completed: %d/%d targets reachable (online=%s)",
        len(report.reachable_targets),
        len(snapshot),
        report.online,
    )
    return report
