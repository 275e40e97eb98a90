"""Banner storage — the store interface and an in-memory implementation."""

from banners.store.base import BannerStore
from banners.store.memory import InMemoryBannerStore

__all__ = ["BannerStore", "InMemoryBannerStore"]
