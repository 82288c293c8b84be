"""
Spherical Bounding Boxes
========================
Axis-aligned latitude/longitude rectangles on the sphere, in radians.

A box is **transmeridian** when ``east < west``: it then spans

    [west, +π] ∪ [−π, east]

across the antimeridian instead of ``[west, east]``.  Edges are inclusive.

The predicates here are hot-path primitives and do not validate their
inputs; use ``hexbbox.schemas`` at trust boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from shapely.geometry import MultiPolygon, Polygon, box

from hexbbox.constants import M_2PI, M_PI
from hexbbox.spatial.latlng import LatLng, constrain_lat, normalize_lng


# ── Bounding Box value type ──────────────────────────────────────
@dataclass(frozen=True, slots=True)
class BBox:
    """A closed lat/lng rectangle in radians."""

    north: float
    south: float
    east: float
    west: float

    @property
    def is_transmeridian(self) -> bool:
        return bbox_is_transmeridian(self)

    @property
    def width_rads(self) -> float:
        return bbox_width_rads(self)

    @property
    def height_rads(self) -> float:
        return bbox_height_rads(self)

    @property
    def center(self) -> LatLng:
        return bbox_center(self)

    def contains(self, point: LatLng) -> bool:
        return bbox_contains(self, point)

    def overlaps(self, other: BBox) -> bool:
        return bbox_overlaps_bbox(self, other)

    def covers(self, other: BBox) -> bool:
        return bbox_covers_bbox(self, other)

    def scaled(self, scale: float) -> BBox:
        return scale_bbox(self, scale)

    def to_shapely(self) -> Polygon | MultiPolygon:
        """
        Return the box as shapely geometry in (lng, lat) radians.

        A transmeridian box is split at the antimeridian into two parts,
        ``[west, π]`` and ``[−π, east]``.
        """
        if self.is_transmeridian:
            return MultiPolygon([
                box(self.west, self.south, M_PI, self.north),
                box(-M_PI, self.south, self.east, self.north),
            ])
        return box(self.west, self.south, self.east, self.north)


ZERO_BBOX = BBox(0.0, 0.0, 0.0, 0.0)


# ── Predicates ───────────────────────────────────────────────────
def bbox_equals(a: BBox, b: BBox) -> bool:
    """Exact field-wise equality; no tolerance is applied."""
    return (
        a.north == b.north
        and a.south == b.south
        and a.east == b.east
        and a.west == b.west
    )


def bbox_is_transmeridian(bbox: BBox) -> bool:
    return bbox.east < bbox.west


def bbox_contains(bbox: BBox, point: LatLng) -> bool:
    """
    Whether ``point`` lies inside or on the edge of ``bbox``.

    For a transmeridian box both ``+π`` and ``−π`` are inside, since the
    longitude test becomes ``lng ≥ west or lng ≤ east``.
    """
    if not (bbox.south <= point.lat <= bbox.north):
        return False
    if bbox_is_transmeridian(bbox):
        return point.lng >= bbox.west or point.lng <= bbox.east
    return bbox.west <= point.lng <= bbox.east


# ── Measurements ─────────────────────────────────────────────────
def bbox_width_rads(bbox: BBox) -> float:
    width = bbox.east - bbox.west
    if bbox_is_transmeridian(bbox):
        width += M_2PI
    return width


def bbox_height_rads(bbox: BBox) -> float:
    return bbox.north - bbox.south


def bbox_center(bbox: BBox) -> LatLng:
    """
    Geographic midpoint of ``bbox``.

    The longitude of a transmeridian box's center is shifted by π and
    normalized into (−π, +π]; a box symmetric about the antimeridian
    therefore has its center at ``lng = +π``, never ``−π``.
    """
    lat = (bbox.north + bbox.south) / 2.0
    lng = (bbox.east + bbox.west) / 2.0
    if bbox_is_transmeridian(bbox):
        lng = normalize_lng(lng + M_PI)
    return LatLng(lat, lng)


# ── Box / box relations ──────────────────────────────────────────
# Both predicates unwrap each box to a single interval [west, east'] with
# east' = east + 2π for transmeridian boxes, then compare the intervals
# with the second box shifted by one turn either way.
_TURN_SHIFTS = (-M_2PI, 0.0, M_2PI)


def _lng_interval(bbox: BBox) -> tuple[float, float]:
    if bbox_is_transmeridian(bbox):
        return bbox.west, bbox.east + M_2PI
    return bbox.west, bbox.east


def bbox_overlaps_bbox(a: BBox, b: BBox) -> bool:
    """Whether two boxes share at least one point (edges count)."""
    if a.north < b.south or a.south > b.north:
        return False

    a_west, a_east = _lng_interval(a)
    b_west, b_east = _lng_interval(b)
    return any(
        a_west <= b_east + shift and b_west + shift <= a_east
        for shift in _TURN_SHIFTS
    )


def bbox_covers_bbox(a: BBox, b: BBox) -> bool:
    """Whether ``a`` fully contains ``b``."""
    if a.north < b.north or a.south > b.south:
        return False

    a_west, a_east = _lng_interval(a)
    if a_east - a_west >= M_2PI:
        return True

    b_west, b_east = _lng_interval(b)
    return any(
        a_west <= b_west + shift and b_east + shift <= a_east
        for shift in _TURN_SHIFTS
    )


# ── Scaling ──────────────────────────────────────────────────────
def scale_bbox(bbox: BBox, scale: float) -> BBox:
    """
    Grow (``scale > 1``) or shrink (``scale < 1``) a box about its center.

    Latitudes are clamped to the poles; longitudes wrap across the
    antimeridian, so a widened box may become transmeridian.  A box whose
    scaled width reaches a full turn spans every longitude, ``[−π, π]``.
    """
    width = bbox.width_rads * scale
    width_buffer = (width - bbox.width_rads) / 2.0
    height_buffer = (bbox.height_rads * scale - bbox.height_rads) / 2.0

    if width >= M_2PI:
        east, west = M_PI, -M_PI
    else:
        east = normalize_lng(bbox.east + width_buffer)
        west = normalize_lng(bbox.west - width_buffer)

    return replace(
        bbox,
        north=constrain_lat(bbox.north + height_buffer),
        south=constrain_lat(bbox.south - height_buffer),
        east=east,
        west=west,
    )
