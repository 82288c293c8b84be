"""hexbbox — spherical bounding boxes for hexagonal geospatial indexing."""

from hexbbox.errors import (
    BackendNotFoundError,
    ErrorCode,
    EstimateFailedError,
    HexBBoxError,
    ResolutionDomainError,
)
from hexbbox.services.estimate import bbox_hex_estimate, line_hex_estimate
from hexbbox.spatial.bbox import (
    BBox,
    bbox_center,
    bbox_contains,
    bbox_equals,
    bbox_is_transmeridian,
)
from hexbbox.spatial.geoloop import GeoLoop, GeoPolygon, bbox_from_geoloop
from hexbbox.spatial.latlng import LatLng, geo_almost_equal, normalize_lng

__all__ = [
    "BackendNotFoundError",
    "ErrorCode",
    "EstimateFailedError",
    "HexBBoxError",
    "ResolutionDomainError",
    "bbox_hex_estimate",
    "line_hex_estimate",
    "BBox",
    "bbox_center",
    "bbox_contains",
    "bbox_equals",
    "bbox_is_transmeridian",
    "GeoLoop",
    "GeoPolygon",
    "bbox_from_geoloop",
    "LatLng",
    "geo_almost_equal",
    "normalize_lng",
]
