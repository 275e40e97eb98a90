"""Promotional banner selection by time window and caller origin."""

from banners.errors import BannerError, DisplayError, StoreReadError, StoreWriteError
from banners.logging_config import configure_logging
from banners.main import create_selector
from banners.models import Banner, BannerRecord, EvaluationContext
from banners.network import is_internal, is_internal_ip
from banners.selector import BannerSelector
from banners.store import BannerStore, InMemoryBannerStore
from banners.timeutils import parse_timestamp, within_period

__all__ = [
    "Banner",
    "BannerError",
    "BannerRecord",
    "BannerSelector",
    "BannerStore",
    "DisplayError",
    "EvaluationContext",
    "InMemoryBannerStore",
    "StoreReadError",
    "StoreWriteError",
    "configure_logging",
    "create_selector",
    "is_internal",
    "is_internal_ip",
    "parse_timestamp",
    "within_period",
]
