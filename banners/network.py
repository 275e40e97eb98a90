"""Caller IP classification — decides whether a request comes from the internal network.

Internal callers may preview banners before their promotional period starts.
Only IPv4 addresses are ever considered internal; IPv6 text (including
IPv4-mapped IPv6) and anything unparsable is treated as external.
"""

from __future__ import annotations

import ipaddress
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from banners.models.context import EvaluationContext


# Internal/staff networks
DEFAULT_INTERNAL_NETWORKS: tuple[ipaddress.IPv4Network, ...] = (
    ipaddress.IPv4Network("10.0.0.0/8"),
)


def parse_networks(cidrs: Iterable[str]) -> tuple[ipaddress.IPv4Network, ...]:
    """Parse CIDR strings into IPv4 networks.

    Raises ``ValueError`` for anything that is not an IPv4 network.
    """
    return tuple(ipaddress.IPv4Network(cidr) for cidr in cidrs)


def is_internal_ip(
    ip_str: str | None,
    networks: Iterable[ipaddress.IPv4Network] = DEFAULT_INTERNAL_NETWORKS,
) -> bool:
    """Check if an IP address string falls within one of the internal networks."""
    if not isinstance(ip_str, str):
        return False
    try:
        addr = ipaddress.IPv4Address(ip_str)
    except ValueError:
        return False  # Not IPv4 → external
    return any(addr in network for network in networks)


def is_internal(
    context: "EvaluationContext | None",
    networks: Iterable[ipaddress.IPv4Network] = DEFAULT_INTERNAL_NETWORKS,
) -> bool:
    """Return True if the context carries an internal caller IP."""
    if context is None:
        return False
    return is_internal_ip(context.ip_address, networks)
