"""
Indexing Back-end
=================
Cell-geometry lookups the hexagon-count estimators delegate to.

The estimators only need two answers from the indexing system:

1. **Pentagon radius** — centre-to-vertex distance of a pentagon at a
   resolution.  Pentagons are the most distorted cells, so their size
   bounds every hexagon's.
2. **Great-circle distance** between two points.

``H3Backend`` answers both with the ``h3`` bindings.  h3 speaks degrees;
the conversion happens here so the rest of hexbbox stays in radians.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Protocol

import h3

from hexbbox.config import get_settings
from hexbbox.errors import BackendNotFoundError
from hexbbox.spatial.latlng import LatLng

logger = logging.getLogger(__name__)


class IndexBackend(Protocol):
    def pentagon_radius_km(self, res: int) -> float: ...

    def great_circle_distance_km(self, a: LatLng, b: LatLng) -> float: ...


# ── h3 ──────────────────────────────────────────────────────────
class H3Backend:
    """
    ``IndexBackend`` backed by the h3 library.

    Pentagon radii are memoized per resolution in a plain dict, without a
    lock.  Threads racing on a cold resolution each compute the same radius
    and the last write wins; nothing else on the instance is mutated.
    """

    name = "h3"

    def __init__(self) -> None:
        self._radius_km: dict[int, float] = {}
        logger.info("H3Backend created")

    def pentagon_radius_km(self, res: int) -> float:
        radius = self._radius_km.get(res)
        if radius is None:
            pentagon = h3.get_pentagons(res)[0]
            center = h3.cell_to_latlng(pentagon)
            vertex = h3.cell_to_boundary(pentagon)[0]
            radius = h3.great_circle_distance(center, vertex, unit="km")
            self._radius_km[res] = radius
            logger.debug("Pentagon radius at res %d: %.6f km", res, radius)
        return radius

    def great_circle_distance_km(self, a: LatLng, b: LatLng) -> float:
        return h3.great_circle_distance(a.to_degrees(), b.to_degrees(), unit="km")


_BACKENDS: dict[str, type] = {
    H3Backend.name: H3Backend,
}


@lru_cache(maxsize=4)
def get_backend(name: str | None = None) -> IndexBackend:
    """
    Return a cached back-end instance.

    ``name`` defaults to ``Settings.estimate_backend``.
    """
    name = name or get_settings().estimate_backend
    try:
        factory = _BACKENDS[name]
    except KeyError:
        raise BackendNotFoundError(
            f"Unknown estimate backend {name!r}; "
            f"available: {', '.join(sorted(_BACKENDS))}"
        ) from None
    return factory()
