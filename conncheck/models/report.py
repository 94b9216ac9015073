"""Probe outcome and connectivity report models."""

from dataclasses import dataclass

from conncheck.models.target import ProbeTarget


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of a single connection attempt."""

    target: ProbeTarget
    reachable: bool
    reason: str | None = None
    trace: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Require a reason exactly when the target is unreachable.

        Raises:
            ValueError: If reason is missing for a failure or set for a success
        """
        if self.reachable and self.reason is not None:
            raise ValueError("reachable outcome cannot carry a failure reason")
        if not self.reachable and self.reason is None:
            raise ValueError("unreachable outcome requires a failure reason")


@dataclass(frozen=True)
class ConnectivityReport:
    """Aggregate result of one connectivity check.

    Outcomes keep the order of the target list the check started with.
    The trace is the flat concatenation of every outcome's lines, two per
    target. An empty trace means no target was attempted.
    """

    outcomes: tuple[ProbeOutcome, ...] = ()

    @property
    def online(self) -> bool:
        """True if any target was reachable."""
        return any(outcome.reachable for outcome in self.outcomes)

    @property
    def trace_lines(self) -> tuple[str, ...]:
        """All trace lines of this check."""
        return tuple(line for outcome in self.outcomes for line in outcome.trace)

    @property
    def trace(self) -> str:
        """Trace lines as text, one newline-terminated line each."""
        return "".join(f"{line}\n" for line in self.trace_lines)

    @property
    def reachable_targets(self) -> tuple[ProbeTarget, ...]:
        return tuple(o.target for o in self.outcomes if o.reachable)

    @property
    def unreachable_targets(self) -> tuple[ProbeTarget, ...]:
        return tuple(o.target for o in self.outcomes if not o.reachable)

    def __bool__(self) -> bool:
        return self.online
