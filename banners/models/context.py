"""Evaluation context — the caller details a banner evaluation depends on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

# The one key recognized when building a context from request metadata
IP_ADDRESS_KEY = "ip-address"


@dataclass(frozen=True)
class EvaluationContext:
    """Carries the caller's IP address, if known.

    A missing IP address is equivalent to an external caller.
    """

    ip_address: str | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "EvaluationContext":
        """Build a context from arbitrary key-value metadata.

        Only ``"ip-address"`` is read; a non-string value is ignored.
        """
        ip = values.get(IP_ADDRESS_KEY)
        return cls(ip_address=ip if isinstance(ip, str) else None)
