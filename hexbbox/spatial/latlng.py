"""
Geodetic Points & Angle Utilities
=================================
Every angle in hexbbox is in radians:

    lat ∈ [−π/2, +π/2]
    lng ∈ (−π, +π]

Degrees only appear at the edges (``LatLng.from_degrees`` and the h3
back-end), never inside the bbox arithmetic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from hexbbox.constants import EPSILON_RAD, M_180_PI, M_2PI, M_PI, M_PI_180, M_PI_2


# ── Unit conversion ──────────────────────────────────────────────
def degs_to_rads(degrees: float) -> float:
    return degrees * M_PI_180


def rads_to_degs(radians: float) -> float:
    return radians * M_180_PI


# ── Normalization ────────────────────────────────────────────────
def normalize_lng(lng: float) -> float:
    """
    Reduce an angle into the half-open longitude range (−π, +π].

    ``−π`` is mapped to ``+π`` so the antimeridian has a single
    representation.
    """
    lng = math.remainder(lng, M_2PI)
    if lng <= -M_PI:
        lng += M_2PI
    return lng


def constrain_lat(lat: float) -> float:
    """Clamp a latitude to the poles."""
    return max(-M_PI_2, min(M_PI_2, lat))


# ── Point value type ─────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class LatLng:
    """A point on the sphere, in radians."""

    lat: float
    lng: float

    @classmethod
    def from_degrees(cls, lat: float, lng: float) -> LatLng:
        return cls(degs_to_rads(lat), degs_to_rads(lng))

    def to_degrees(self) -> tuple[float, float]:
        """Return ``(lat, lng)`` in degrees, the order h3 expects."""
        return rads_to_degs(self.lat), rads_to_degs(self.lng)


# ── Comparison ───────────────────────────────────────────────────
def geo_almost_equal_threshold(a: LatLng, b: LatLng, threshold: float) -> bool:
    return abs(a.lat - b.lat) < threshold and abs(a.lng - b.lng) < threshold


def geo_almost_equal(a: LatLng, b: LatLng) -> bool:
    """
    True when both coordinates agree to within ``EPSILON_RAD``.

    This is a coordinate-wise test: ``lng = +π`` and ``lng = −π`` are the
    same meridian but are *not* almost equal here.
    """
    return geo_almost_equal_threshold(a, b, EPSILON_RAD)
