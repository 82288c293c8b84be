"""Schemas subpackage — Pydantic validation models for untrusted input."""

from hexbbox.schemas.geo import (
    BBoxIn,
    GeoLoopIn,
    HexEstimateRequest,
    LatLngIn,
    LineEstimateRequest,
)

__all__ = [
    "BBoxIn",
    "GeoLoopIn",
    "HexEstimateRequest",
    "LatLngIn",
    "LineEstimateRequest",
]
