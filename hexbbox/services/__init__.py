"""Services subpackage — hexagon-count estimation and its back-ends."""

from hexbbox.services.backend import H3Backend, IndexBackend, get_backend
from hexbbox.services.estimate import (
    bbox_hex_estimate,
    line_hex_estimate,
    validate_resolution,
)

__all__ = [
    "H3Backend",
    "IndexBackend",
    "get_backend",
    "bbox_hex_estimate",
    "line_hex_estimate",
    "validate_resolution",
]
