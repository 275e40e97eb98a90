"""Error hierarchy for banner stores and banner display actions.

All banner-specific errors extend BannerError. The selector itself never
raises or wraps these: store implementations raise the store errors, banner
implementations raise DisplayError, and the selector lets them reach the
caller untouched.
"""

from __future__ import annotations


class BannerError(Exception):
    """Base error for all banner-specific errors."""

    message: str = "Banner error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class StoreReadError(BannerError):
    """The banner store could not enumerate banners."""

    message = "Failed to read banners from store"


class StoreWriteError(BannerError):
    """The banner store could not persist a banner."""

    message = "Failed to save banner to store"


class DisplayError(BannerError):
    """The selected banner's display action failed."""

    message = "Failed to display banner"
