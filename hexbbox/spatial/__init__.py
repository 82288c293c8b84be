"""Spatial subpackage — lat/lng points, bounding boxes and loops."""

from hexbbox.spatial.bbox import (
    ZERO_BBOX,
    BBox,
    bbox_center,
    bbox_contains,
    bbox_covers_bbox,
    bbox_equals,
    bbox_height_rads,
    bbox_is_transmeridian,
    bbox_overlaps_bbox,
    bbox_width_rads,
    scale_bbox,
)
from hexbbox.spatial.geoloop import (
    GeoLoop,
    GeoPolygon,
    bbox_from_geoloop,
    bboxes_from_geo_polygon,
)
from hexbbox.spatial.latlng import (
    LatLng,
    constrain_lat,
    degs_to_rads,
    geo_almost_equal,
    geo_almost_equal_threshold,
    normalize_lng,
    rads_to_degs,
)

__all__ = [
    "ZERO_BBOX",
    "BBox",
    "bbox_center",
    "bbox_contains",
    "bbox_covers_bbox",
    "bbox_equals",
    "bbox_height_rads",
    "bbox_is_transmeridian",
    "bbox_overlaps_bbox",
    "bbox_width_rads",
    "scale_bbox",
    "GeoLoop",
    "GeoPolygon",
    "bbox_from_geoloop",
    "bboxes_from_geo_polygon",
    "LatLng",
    "constrain_lat",
    "degs_to_rads",
    "geo_almost_equal",
    "geo_almost_equal_threshold",
    "normalize_lng",
    "rads_to_degs",
]
