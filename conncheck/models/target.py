"""Probe target data models."""

from dataclasses import dataclass

# DNS port, probed when no port is given.
DEFAULT_PORT = 53

# Seconds before an attempt is dropped and the address counted as unreachable.
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ProbeTarget:
    """A single (address, port, timeout) to attempt a TCP connection against.

    The address is not validated here. An unresolvable or malformed address
    surfaces as an unreachable outcome when the probe runs.
    """

    address: str  # also accepts ipaddress objects, normalized to str
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Normalize the address and validate port range and timeout.

        Address objects such as ipaddress.IPv4Address are stored as their
        string form, which is what the connection attempt expects.

        Raises:
            ValueError: If port is outside 1-65535 or timeout is not positive
        """
        object.__setattr__(self, "address", str(self.address))
        if not 0 < self.port <= 65535:
            raise ValueError(f"port must be in 1-65535, got {self.port}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")

    def __str__(self) -> str:
        return f"{self.address}, port: {self.port}, timeout: {self.timeout:g}s"
