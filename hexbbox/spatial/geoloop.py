"""
Geo Loops & Polygons
====================
Closed vertex rings and the tightest bounding box around them.

A ring's edges are taken along the *shorter* longitude path between
consecutive vertices, so an edge whose longitude delta exceeds π is
treated as crossing the antimeridian.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from hexbbox.constants import M_PI
from hexbbox.spatial.bbox import ZERO_BBOX, BBox
from hexbbox.spatial.latlng import LatLng


# ── Loop / polygon value types ───────────────────────────────────
@dataclass(frozen=True, slots=True)
class GeoLoop:
    """An ordered ring of vertices with an implicit closing edge."""

    verts: tuple[LatLng, ...] = ()

    @classmethod
    def from_iterable(cls, verts: Iterable[LatLng]) -> GeoLoop:
        return cls(tuple(verts))

    @property
    def num_verts(self) -> int:
        return len(self.verts)

    def __len__(self) -> int:
        return len(self.verts)

    def __iter__(self) -> Iterator[LatLng]:
        return iter(self.verts)

    def edges(self) -> Iterator[tuple[LatLng, LatLng]]:
        """Yield ``(vertex, successor)`` pairs, closing back to the first."""
        n = len(self.verts)
        for i in range(n):
            yield self.verts[i], self.verts[(i + 1) % n]

    @property
    def bbox(self) -> BBox:
        return bbox_from_geoloop(self)


@dataclass(frozen=True, slots=True)
class GeoPolygon:
    """An outer loop plus zero or more holes."""

    geoloop: GeoLoop
    holes: tuple[GeoLoop, ...] = field(default_factory=tuple)

    @property
    def num_holes(self) -> int:
        return len(self.holes)

    @property
    def bboxes(self) -> list[BBox]:
        return bboxes_from_geo_polygon(self)


# ── Bounding boxes ───────────────────────────────────────────────
def bbox_from_geoloop(loop: GeoLoop) -> BBox:
    """
    Compute the smallest bbox containing every vertex and edge of ``loop``.

    The loop is transmeridian as soon as one edge spans more than π of
    longitude.  Its east edge is then the largest negative longitude seen
    and its west edge the smallest non-negative one.  An empty loop gives
    the zero bbox.
    """
    if not loop.verts:
        return ZERO_BBOX

    north = -math.inf
    south = math.inf
    east = -math.inf
    west = math.inf
    min_pos_lng = math.inf
    max_neg_lng = -math.inf
    is_transmeridian = False

    for coord, nxt in loop.edges():
        lat, lng = coord.lat, coord.lng

        if lat < south:
            south = lat
        if lat > north:
            north = lat
        if lng < west:
            west = lng
        if lng > east:
            east = lng

        # Kept for the transmeridian case
        if lng >= 0:
            if lng < min_pos_lng:
                min_pos_lng = lng
        elif lng > max_neg_lng:
            max_neg_lng = lng

        if abs(lng - nxt.lng) > M_PI:
            is_transmeridian = True

    if is_transmeridian:
        east = max_neg_lng
        west = min_pos_lng

    return BBox(north=north, south=south, east=east, west=west)


def bboxes_from_geo_polygon(polygon: GeoPolygon) -> list[BBox]:
    """One bbox per loop: the outer loop first, then each hole in order."""
    return [bbox_from_geoloop(polygon.geoloop)] + [
        bbox_from_geoloop(hole) for hole in polygon.holes
    ]
