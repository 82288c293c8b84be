"""
Shared fixtures for the hexbbox test suite.

This conftest provides:
- A deterministic in-memory indexing back-end
- Cache resets for the settings / back-end factories
- Reusable loop factories
"""
from __future__ import annotations

import math

import pytest

from hexbbox.config import get_settings
from hexbbox.services.backend import get_backend
from hexbbox.spatial.geoloop import GeoLoop
from hexbbox.spatial.latlng import LatLng


# ---------------------------------------------------------------------------
# Fake back-end
# ---------------------------------------------------------------------------
class FakeBackend:
    """
    Stand-in for ``H3Backend`` with fixed answers.

    ``distance_km`` may be a float or a callable ``(a, b) -> float``.
    """

    def __init__(self, radius_km: float = 1.0, distance_km=10.0) -> None:
        self.radius_km = radius_km
        self.distance_km = distance_km
        self.radius_calls: list[int] = []
        self.distance_calls: list[tuple[LatLng, LatLng]] = []

    def pentagon_radius_km(self, res: int) -> float:
        self.radius_calls.append(res)
        return self.radius_km

    def great_circle_distance_km(self, a: LatLng, b: LatLng) -> float:
        self.distance_calls.append((a, b))
        if callable(self.distance_km):
            return self.distance_km(a, b)
        return self.distance_km


@pytest.fixture()
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture(autouse=True)
def _clear_caches():
    get_settings.cache_clear()
    get_backend.cache_clear()
    yield
    get_settings.cache_clear()
    get_backend.cache_clear()


# ---------------------------------------------------------------------------
# Loop factories
# ---------------------------------------------------------------------------
def make_loop(*verts: tuple[float, float]) -> GeoLoop:
    """Build a GeoLoop from ``(lat, lng)`` pairs in radians."""
    return GeoLoop(tuple(LatLng(lat, lng) for lat, lng in verts))


def same_meridian(a: float, b: float, tol: float = 1e-9) -> bool:
    """Longitude equality modulo 2π, so that +π and −π compare equal."""
    diff = math.remainder(a - b, 2 * math.pi)
    return abs(diff) < tol
