"""Shared test fixtures, fakes and hypothesis strategies for the banner test suite."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import strategies as st

from banners.errors import StoreReadError, StoreWriteError
from banners.models.context import EvaluationContext
from banners.selector import BannerSelector
from banners.store.base import BannerStore
from banners.store.memory import InMemoryBannerStore


# Fixed evaluation time used by every time-sensitive test
NOW = datetime(2026, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def ts(dt: datetime) -> str:
    """Format an aware datetime as RFC 3339 text."""
    return dt.isoformat()


def hours(n: float) -> timedelta:
    return timedelta(hours=n)


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class FakeBanner:
    """Minimal Banner implementation that records displays."""

    start: str
    expiration: str
    expired: bool = False
    display_error: Exception | None = None
    displayed: int = 0

    def get_expiration(self) -> str:
        return self.expiration

    def get_start(self) -> str:
        return self.start

    def is_expired(self) -> bool:
        return self.expired

    def display(self) -> None:
        if self.display_error is not None:
            raise self.display_error
        self.displayed += 1


def make_banner(start_offset: float, expiration_offset: float, **kwargs: object) -> FakeBanner:
    """Build a FakeBanner whose window is given in hours relative to NOW."""
    return FakeBanner(
        start=ts(NOW + hours(start_offset)),
        expiration=ts(NOW + hours(expiration_offset)),
        **kwargs,  # type: ignore[arg-type]
    )


class FailingStore(BannerStore):
    """Store whose reads and writes always fail with fixed exception objects."""

    def __init__(self) -> None:
        self.read_error = StoreReadError("database unavailable")
        self.write_error = StoreWriteError("disk full")

    def get_banners(self):
        raise self.read_error

    def save_banner(self, banner) -> None:
        raise self.write_error


def make_selector(banners: list) -> BannerSelector:
    """Selector over an in-memory store, evaluated at NOW."""
    return BannerSelector(InMemoryBannerStore(banners), clock=lambda: NOW)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def internal_context() -> EvaluationContext:
    return EvaluationContext(ip_address="10.0.255.1")


@pytest.fixture
def external_context() -> EvaluationContext:
    return EvaluationContext(ip_address="1.1.1.1")


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------

# Any IPv4 address inside / outside 10.0.0.0/8
internal_ips = st.integers(min_value=0x0A000000, max_value=0x0AFFFFFF).map(
    lambda n: ".".join(str((n >> shift) & 0xFF) for shift in (24, 16, 8, 0))
)
external_ips = st.ip_addresses(v=4).filter(lambda a: a.packed[0] != 10).map(str)

# Offsets from NOW in whole minutes, at most a week either way
minute_offsets = st.integers(min_value=-7 * 24 * 60, max_value=7 * 24 * 60)

# Text that is not RFC 3339
malformed_timestamps = st.one_of(
    st.just(""),
    st.just("2026-06-01 12:00:00"),
    st.just("2026-06-01T12:00:00"),
    st.just("2026-13-01T12:00:00Z"),
    st.just("01/06/2026"),
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz ", max_size=20),
)
