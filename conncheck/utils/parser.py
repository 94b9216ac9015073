"""Probe target string parsing."""

from conncheck.models import DEFAULT_PORT, DEFAULT_TIMEOUT, ProbeTarget


def _parse_port(value: str, entry: str) -> int:
    value = value.strip()
    if not value:
        raise ValueError(f"Port cannot be empty in target '{entry}'")
    if not value.isdigit():
        raise ValueError(f"Invalid port '{value}' in target '{entry}'")
    return int(value)


def parse_target(
    entry: str,
    default_port: int = DEFAULT_PORT,
    timeout: float = DEFAULT_TIMEOUT,
) -> ProbeTarget:
    """Parse a probe target string.

    Formats:
        - "1.1.1.1" or "dns.example" -> default port
        - "1.1.1.1:853" -> explicit port
        - "[2606:4700::1111]:53" -> bracketed IPv6 with port
        - "[2606:4700::1111]" or "2606:4700::1111" -> IPv6, default port

    Returns:
        ProbeTarget with the parsed address and port.

    Raises:
        ValueError: If the entry is blank or the port is malformed or out of range.
    """
    entry = entry.strip()
    if not entry:
        raise ValueError("Target cannot be empty")

    port = default_port
    if entry.startswith("["):
        host, closed, rest = entry[1:].partition("]")
        if not closed:
            raise ValueError(f"Unclosed bracket in target '{entry}'")
        if rest:
            if not rest.startswith(":"):
                raise ValueError(f"Unexpected text after address in target '{entry}'")
            port = _parse_port(rest[1:], entry)
    elif entry.count(":") == 1:
        host, port_str = entry.split(":")
        port = _parse_port(port_str, entry)
    else:
        # Hostname, IPv4 literal or unbracketed IPv6 literal
        host = entry

    host = host.strip()
    if not host:
        raise ValueError(f"Address cannot be empty in target '{entry}'")

    return ProbeTarget(address=host, port=port, timeout=timeout)
