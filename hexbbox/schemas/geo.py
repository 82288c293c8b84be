"""
Pydantic validation models for coordinates arriving from untrusted input.

The geometry primitives in ``hexbbox.spatial`` assume normalized, finite
radians and never check.  These models are the checking layer: parse
here, then call ``to_domain()`` to get the plain value types.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from hexbbox.constants import M_PI, M_PI_2, MAX_RES
from hexbbox.spatial.bbox import BBox
from hexbbox.spatial.geoloop import GeoLoop
from hexbbox.spatial.latlng import LatLng


def _lat(description: str):
    return Field(ge=-M_PI_2, le=M_PI_2, allow_inf_nan=False, description=description)


def _lng(description: str):
    return Field(gt=-M_PI, le=M_PI, allow_inf_nan=False, description=description)


# ═══════════════════════════════════════════════════════════════════
# Points
# ═══════════════════════════════════════════════════════════════════
class LatLngIn(BaseModel):
    """A point in radians; longitude must already be in (−π, π]."""

    lat: float = _lat("Latitude (rad)")
    lng: float = _lng("Longitude (rad)")

    model_config = {"frozen": True}

    def to_domain(self) -> LatLng:
        return LatLng(self.lat, self.lng)


# ═══════════════════════════════════════════════════════════════════
# Bounding boxes
# ═══════════════════════════════════════════════════════════════════
class BBoxIn(BaseModel):
    """
    A bounding box in radians.

    ``east < west`` is allowed and means the box crosses the antimeridian.
    """

    north: float = _lat("North edge latitude (rad)")
    south: float = _lat("South edge latitude (rad)")
    east: float = _lng("East edge longitude (rad)")
    west: float = _lng("West edge longitude (rad)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def north_not_below_south(self) -> BBoxIn:
        if self.north < self.south:
            raise ValueError("north must be >= south")
        return self

    def to_domain(self) -> BBox:
        return BBox(
            north=self.north,
            south=self.south,
            east=self.east,
            west=self.west,
        )


# ═══════════════════════════════════════════════════════════════════
# Loops
# ═══════════════════════════════════════════════════════════════════
class GeoLoopIn(BaseModel):
    verts: list[LatLngIn] = Field(
        default_factory=list,
        description="Ring vertices; the closing edge is implicit",
    )

    def to_domain(self) -> GeoLoop:
        return GeoLoop.from_iterable(v.to_domain() for v in self.verts)


# ═══════════════════════════════════════════════════════════════════
# Estimator requests
# ═══════════════════════════════════════════════════════════════════
class HexEstimateRequest(BaseModel):
    bbox: BBoxIn
    res: int = Field(ge=0, le=MAX_RES, strict=True, description="H3 resolution")

    def to_domain(self) -> tuple[BBox, int]:
        return self.bbox.to_domain(), self.res


class LineEstimateRequest(BaseModel):
    origin: LatLngIn
    destination: LatLngIn
    res: int = Field(ge=0, le=MAX_RES, strict=True, description="H3 resolution")

    def to_domain(self) -> tuple[LatLng, LatLng, int]:
        return self.origin.to_domain(), self.destination.to_domain(), self.res
