"""
Tests for package __init__ imports — verifies all public symbols are accessible.
"""
from __future__ import annotations


class TestSpatialInit:
    def test_all_exports(self):
        from hexbbox.spatial import (
            ZERO_BBOX,
            BBox,
            GeoLoop,
            GeoPolygon,
            LatLng,
            bbox_center,
            bbox_contains,
            bbox_covers_bbox,
            bbox_equals,
            bbox_from_geoloop,
            bbox_height_rads,
            bbox_is_transmeridian,
            bbox_overlaps_bbox,
            bbox_width_rads,
            bboxes_from_geo_polygon,
            constrain_lat,
            degs_to_rads,
            geo_almost_equal,
            geo_almost_equal_threshold,
            normalize_lng,
            rads_to_degs,
            scale_bbox,
        )
        assert BBox is not None
        assert bbox_from_geoloop is not None


class TestServicesInit:
    def test_all_exports(self):
        from hexbbox.services import (
            H3Backend,
            IndexBackend,
            bbox_hex_estimate,
            get_backend,
            line_hex_estimate,
            validate_resolution,
        )
        assert H3Backend is not None
        assert bbox_hex_estimate is not None


class TestSchemasInit:
    def test_all_exports(self):
        from hexbbox.schemas import (
            BBoxIn,
            GeoLoopIn,
            HexEstimateRequest,
            LatLngIn,
            LineEstimateRequest,
        )
        assert BBoxIn is not None


class TestPackageInit:
    def test_top_level_api(self):
        import hexbbox

        for name in hexbbox.__all__:
            assert getattr(hexbbox, name) is not None

    def test_operations_reexported(self):
        from hexbbox import (
            bbox_center,
            bbox_contains,
            bbox_equals,
            bbox_from_geoloop,
            bbox_hex_estimate,
            bbox_is_transmeridian,
            line_hex_estimate,
        )
        assert bbox_hex_estimate is not None
