"""Banner protocol and a ready-made record implementation.

Timestamps are RFC 3339 text. A banner whose start or expiration cannot be
parsed is never displayed, but storing one is not an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Protocol, runtime_checkable

from banners.errors import DisplayError

logger = logging.getLogger(__name__)


@runtime_checkable
class Banner(Protocol):
    """Anything the selector can evaluate and display."""

    def get_expiration(self) -> str: ...

    def get_start(self) -> str: ...

    def is_expired(self) -> bool: ...

    def display(self) -> None:
        """Show the banner. Raises on failure."""
        ...


@dataclass
class BannerRecord:
    """A banner with its promotional window and display bookkeeping.

    ``renderer`` is called with the record on every display. One-time banners
    mark themselves expired after their first successful display.
    """

    banner_id: str
    start: str
    expiration: str
    expired: bool = False
    content: str = ""
    one_time: bool = False
    renderer: Callable[["BannerRecord"], None] | None = field(default=None, repr=False)
    display_count: int = 0

    def get_expiration(self) -> str:
        return self.expiration

    def get_start(self) -> str:
        return self.start

    def is_expired(self) -> bool:
        return self.expired

    def display(self) -> None:
        """Render the banner and record the display.

        Raises ``DisplayError`` chained to the renderer's exception if
        rendering fails; the record is left untouched in that case.
        """
        if self.renderer is not None:
            try:
                self.renderer(self)
            except Exception as exc:
                raise DisplayError(
                    f"Failed to display banner '{self.banner_id}'",
                    banner_id=self.banner_id,
                ) from exc

        self.display_count += 1
        if self.one_time:
            self.expired = True
            logger.info("One-time banner '%s' marked expired", self.banner_id)
