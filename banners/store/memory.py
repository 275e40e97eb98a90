"""In-process banner store backed by a list."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Iterable

from banners.store.base import BannerStore

if TYPE_CHECKING:
    from banners.models.banner import Banner

logger = logging.getLogger(__name__)


class InMemoryBannerStore(BannerStore):
    """Keeps banners in insertion order. Safe to share between threads."""

    def __init__(self, banners: Iterable["Banner"] = ()) -> None:
        self._banners: list["Banner"] = list(banners)
        self._lock = threading.Lock()

    def get_banners(self) -> list["Banner"]:
        """Return a snapshot of the stored banners."""
        with self._lock:
            return list(self._banners)

    def save_banner(self, banner: "Banner") -> None:
        with self._lock:
            self._banners.append(banner)
            count = len(self._banners)
        logger.debug("Saved banner (store now holds %d)", count)

    def __len__(self) -> int:
        with self._lock:
            return len(self._banners)
