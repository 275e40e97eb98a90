"""Promotional period helpers.

Provides RFC 3339 timestamp parsing and the within-period check that decides
whether a banner may be shown right now.
"""

from __future__ import annotations

import ipaddress
import logging
import re
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Iterable

from banners.network import DEFAULT_INTERNAL_NETWORKS, is_internal

if TYPE_CHECKING:
    from banners.models.banner import Banner
    from banners.models.context import EvaluationContext

logger = logging.getLogger(__name__)


# YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM)
_RFC3339 = re.compile(
    r"(?P<datetime>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def parse_timestamp(text: object) -> datetime | None:
    """Parse RFC 3339 text into an aware datetime.

    Fractions finer than microseconds are truncated. Returns None for anything
    that is not a well-formed RFC 3339 date-time, including out-of-range
    fields such as month 13.
    """
    if not isinstance(text, str):
        return None

    match = _RFC3339.fullmatch(text)
    if match is None:
        return None

    fraction = (match.group("fraction") or "").ljust(6, "0")[:6]
    offset = match.group("offset")
    if offset == "Z":
        offset = "+00:00"

    try:
        return datetime.fromisoformat(f"{match.group('datetime')}.{fraction}{offset}")
    except ValueError:
        return None


def within_period(
    context: "EvaluationContext | None",
    banner: "Banner",
    now: datetime | None = None,
    internal_networks: Iterable[ipaddress.IPv4Network] = DEFAULT_INTERNAL_NETWORKS,
) -> bool:
    """Check if *banner* is inside its promotional period at *now*.

    The general window is (start, expiration), both ends exclusive. Internal
    callers skip the start check and only need ``now < expiration``.

    Args:
        context: Caller context; None means an external caller.
        banner: The banner to check.
        now: Aware datetime to check against. If None, uses the current UTC
            time from the system clock.
        internal_networks: Networks whose callers may preview banners.

    Returns:
        True if the banner may be shown, False otherwise (including when
        either timestamp is malformed).
    """
    expiration = parse_timestamp(banner.get_expiration())
    if expiration is None:
        logger.debug(
            "Unparsable banner expiration %r",
            banner.get_expiration(),
            extra={"expiration": banner.get_expiration(), "error_reason": "unparsable expiration"},
        )
        return False
    start = parse_timestamp(banner.get_start())
    if start is None:
        logger.debug(
            "Unparsable banner start %r",
            banner.get_start(),
            extra={"expiration": banner.get_expiration(), "error_reason": "unparsable start"},
        )
        return False

    if now is None:
        now = datetime.now(timezone.utc)

    if is_internal(context, internal_networks) and now < expiration:
        return True
    return start < now < expiration
