"""Banner selection — filters banners to those valid right now and displays one.

A banner is valid when it has not been marked expired and it is inside its
promotional period for the caller (see ``within_period``). Only one banner is
displayed per call: the valid banner with the earliest expiration. When
several share that expiration, the first in store order wins.

Store and display failures are never caught, wrapped or retried; the caller
receives the exact exception the collaborator raised.
"""

from __future__ import annotations

import ipaddress
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, Iterable

from banners.network import DEFAULT_INTERNAL_NETWORKS, is_internal, parse_networks
from banners.timeutils import parse_timestamp, within_period

if TYPE_CHECKING:
    from banners.config.settings import BannerSettings
    from banners.models.banner import Banner
    from banners.models.context import EvaluationContext
    from banners.store.base import BannerStore

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BannerSelector:
    """Chooses which banner, if any, to display for a caller.

    ``clock`` returns the aware current time and defaults to the UTC system
    clock.
    """

    def __init__(
        self,
        store: "BannerStore",
        internal_networks: Iterable[ipaddress.IPv4Network] = DEFAULT_INTERNAL_NETWORKS,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._internal_networks = tuple(internal_networks)
        self._clock = clock or _utc_now

    @classmethod
    def from_settings(cls, store: "BannerStore", settings: "BannerSettings") -> "BannerSelector":
        """Build a selector using the internal networks from *settings*."""
        return cls(store, internal_networks=parse_networks(settings.internal_networks))

    # ------------------------------------------------------------------
    # Storage pass-through
    # ------------------------------------------------------------------

    def add_banner(self, banner: "Banner") -> None:
        """Save *banner* to the store.

        Timestamps are not validated here; a malformed banner is simply never
        considered valid later.
        """
        self._store.save_banner(banner)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def list_valid_banners(self, context: "EvaluationContext | None" = None) -> list["Banner"]:
        """Return the banners that may be shown to the caller right now, in store order.

        Banners marked expired are excluded even if their promotional period
        has not ended. Any error raised by the store propagates unchanged.
        """
        try:
            banners = self._store.get_banners()
        except Exception as exc:
            logger.warning("Failed to read banners from store", extra={"error_reason": exc})
            raise

        now = self._clock()
        valid = [
            b
            for b in banners
            if not b.is_expired() and within_period(context, b, now, self._internal_networks)
        ]

        logger.debug(
            "Evaluated %d banners, %d valid",
            len(banners),
            len(valid),
            extra={
                "client_ip": context.ip_address if context is not None else None,
                "internal": is_internal(context, self._internal_networks),
                "banner_count": len(banners),
                "valid_count": len(valid),
            },
        )
        return valid

    def display_appropriate_banner(self, context: "EvaluationContext | None" = None) -> bool:
        """Display the valid banner that expires soonest.

        Returns False when there is nothing to display, True once a banner has
        been displayed. If the banner's display action raises, the exception
        propagates and no other banner is tried.
        """
        banners = self.list_valid_banners(context)
        if not banners:
            return False

        # min() keeps the first of equal keys, so ties go to store order.
        # Valid banners always have a parsable expiration.
        selected = min(banners, key=lambda b: parse_timestamp(b.get_expiration()))

        try:
            selected.display()
        except Exception as exc:
            logger.warning(
                "Banner display failed",
                extra={"expiration": selected.get_expiration(), "error_reason": exc},
            )
            raise

        logger.info(
            "Displayed banner expiring at %s",
            selected.get_expiration(),
            extra={"expiration": selected.get_expiration()},
        )
        return True
