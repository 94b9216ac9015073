"""Default probe targets.

Opinionated, but a reasonable starting point. Each is an independent
public DNS resolver on the default port and timeout:

    1.1.1.1           Cloudflare  https://one.one.one.one/
    8.8.4.4           Google      https://developers.google.com/speed/public-dns/
    208.67.222.222    OpenDNS     https://use.opendns.com/
"""

from typing import Final

from conncheck.models import ProbeTarget

DEFAULT_ADDRESSES: Final[tuple[ProbeTarget, ...]] = (
    ProbeTarget("1.1.1.1"),
    ProbeTarget("8.8.4.4"),
    ProbeTarget("208.67.222.222"),
)
