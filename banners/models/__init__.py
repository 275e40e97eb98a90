"""Banner models — the banner protocol, record type and evaluation context."""

from banners.models.banner import Banner, BannerRecord
from banners.models.context import IP_ADDRESS_KEY, EvaluationContext

__all__ = [
    "Banner",
    "BannerRecord",
    "EvaluationContext",
    "IP_ADDRESS_KEY",
]
