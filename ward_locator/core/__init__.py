"""
Core domain models and pure functions for ward-locator.

This module contains the zone models, geometry primitives and
area detection logic, independent of I/O and infrastructure.
"""

from .models import (
    AreaResolution, BoundingBox, Coordinate, DetectionResult,
    NearestAreaResult, SubZone, ValidationReport, Ward, Zone,
)
from .errors import (
    BoundaryDecodeError, BoundaryValidationError, InvalidCoordinateError, WardLocatorError,
)
from .geometry import (
    haversine_distance_km, point_in_bounding_box, point_in_polygon,
    polygon_bounding_box, polygon_centroid,
)
from .simplify import simplify_polygon
from .validation import validate_boundary_text, validate_coordinate, validate_polygon
from .detection import (
    detect_location_area, find_containing_wards, find_nearest_area, resolve_location_area,
)

__all__ = [
    "AreaResolution", "BoundingBox", "Coordinate", "DetectionResult",
    "NearestAreaResult", "SubZone", "ValidationReport", "Ward", "Zone",
    "BoundaryDecodeError", "BoundaryValidationError", "InvalidCoordinateError",
    "WardLocatorError",
    "haversine_distance_km", "point_in_bounding_box", "point_in_polygon",
    "polygon_bounding_box", "polygon_centroid",
    "simplify_polygon",
    "validate_boundary_text", "validate_coordinate", "validate_polygon",
    "detect_location_area", "find_containing_wards", "find_nearest_area",
    "resolve_location_area",
]
