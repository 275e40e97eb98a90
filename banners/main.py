"""Startup wiring for applications embedding the banner selector.

Loads settings from the environment, configures JSON logging at the configured
level, and builds a selector over the application's store.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from banners.config.settings import BannerSettings
from banners.logging_config import configure_logging
from banners.selector import BannerSelector

if TYPE_CHECKING:
    from banners.store.base import BannerStore

logger = logging.getLogger(__name__)


def create_selector(
    store: "BannerStore",
    settings: BannerSettings | None = None,
) -> BannerSelector:
    """Configure logging from *settings* and return a selector over *store*.

    When *settings* is None they are read from ``BANNERS_*`` environment
    variables.
    """
    if settings is None:
        settings = BannerSettings()

    configure_logging(settings.log_level)
    logger.info(
        "Banner selector starting with internal networks %s",
        ", ".join(settings.internal_networks),
    )
    return BannerSelector.from_settings(store, settings)
