"""Configuration module — environment-driven settings."""

from banners.config.settings import BannerSettings

__all__ = ["BannerSettings"]
