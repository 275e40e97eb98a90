"""Pydantic Settings for the banner selector.

All environment variables use the BANNERS_ prefix.
Example: BANNERS_LOG_LEVEL=DEBUG, BANNERS_INTERNAL_NETWORKS='["10.0.0.0/8"]'
"""

from __future__ import annotations

import ipaddress

from pydantic import field_validator
from pydantic_settings import BaseSettings


class BannerSettings(BaseSettings):
    """Banner selector configuration validated from environment variables."""

    log_level: str = "INFO"

    # Callers from these networks may preview banners before their start time
    internal_networks: list[str] = ["10.0.0.0/8"]

    model_config = {"env_prefix": "BANNERS_"}

    @field_validator("internal_networks")
    @classmethod
    def _validate_ipv4_networks(cls, value: list[str]) -> list[str]:
        for cidr in value:
            # Raises ValueError (surfaced as a ValidationError) for non-IPv4 CIDRs
            ipaddress.IPv4Network(cidr)
        return value
