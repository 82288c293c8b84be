"""
Hexagon-Count Estimators
========================
Upper-bound-ish guesses of how many cells at a resolution are needed to
cover a bounding box or a line segment.  Callers use them to size buffers
before running the real polyfill / grid-path algorithms.

Both estimators validate the resolution first and only then consult the
indexing back-end.  With ``r`` the pentagon radius at the resolution:

    bbox:  ⌈ (d² / min(clamp, d1/d2)) / (factor · (3√3/2) · r²) ⌉
    line:  ⌈ d / 2r ⌉

where ``d`` is the great-circle distance across the bbox diagonal (or
along the line) and ``d1 ≥ d2`` are the bbox's angular spans.  Results
are never below 1.
"""

from __future__ import annotations

import logging
import math
from numbers import Integral

from hexbbox.config import get_settings
from hexbbox.constants import HEXAGON_AREA_COEFF, MAX_RES
from hexbbox.errors import EstimateFailedError, ResolutionDomainError
from hexbbox.services.backend import IndexBackend, get_backend
from hexbbox.spatial.bbox import BBox
from hexbbox.spatial.latlng import LatLng

logger = logging.getLogger(__name__)


def validate_resolution(res: int) -> None:
    """Raise ``ResolutionDomainError`` unless ``0 <= res <= MAX_RES``."""
    if isinstance(res, bool) or not isinstance(res, Integral):
        raise ResolutionDomainError(res)
    if res < 0 or res > MAX_RES:
        raise ResolutionDomainError(res)


def _to_count(value: float, what: str) -> int:
    if not math.isfinite(value):
        logger.warning("%s estimate is not finite (%r)", what, value)
        raise EstimateFailedError(f"{what} estimate is not finite: {value!r}")
    return max(1, math.ceil(value))


# ── Bounding box ─────────────────────────────────────────────────
def bbox_hex_estimate(
    bbox: BBox,
    res: int,
    backend: IndexBackend | None = None,
) -> int:
    """
    Estimate the number of cells at ``res`` needed to cover ``bbox``.

    Raises
    ------
    ResolutionDomainError
        ``res`` is outside ``[0, 15]``.
    EstimateFailedError
        The arithmetic produced a non-finite value.
    """
    validate_resolution(res)
    if backend is None:
        backend = get_backend()
    settings = get_settings()

    pentagon_radius_km = backend.pentagon_radius_km(res)
    pentagon_area_km2 = (
        settings.pentagon_area_factor
        * HEXAGON_AREA_COEFF
        * pentagon_radius_km
        * pentagon_radius_km
    )

    # Opposite corners of the box
    p1 = LatLng(bbox.north, bbox.east)
    p2 = LatLng(bbox.south, bbox.west)
    d = backend.great_circle_distance_km(p1, p2)

    d1 = abs(p1.lng - p2.lng)
    d2 = abs(p1.lat - p2.lat)
    if d1 < d2:
        d1, d2 = d2, d1

    # Rectangle area from its diagonal and aspect ratio; a zero-height
    # box has an infinite ratio and collapses to the clamp.
    ratio = d1 / d2 if d2 else math.inf
    area_km2 = d * d / min(settings.max_aspect_ratio, ratio)

    estimate = _to_count(area_km2 / pentagon_area_km2, "bbox")
    logger.debug("bbox_hex_estimate(res=%d) = %d", res, estimate)
    return estimate


# ── Line ─────────────────────────────────────────────────────────
def line_hex_estimate(
    origin: LatLng,
    destination: LatLng,
    res: int,
    backend: IndexBackend | None = None,
) -> int:
    """
    Estimate the number of cells at ``res`` a line from ``origin`` to
    ``destination`` passes through.
    """
    validate_resolution(res)
    if backend is None:
        backend = get_backend()

    pentagon_radius_km = backend.pentagon_radius_km(res)
    dist_km = backend.great_circle_distance_km(origin, destination)

    estimate = _to_count(dist_km / (2 * pentagon_radius_km), "line")
    logger.debug("line_hex_estimate(res=%d) = %d", res, estimate)
    return estimate
