"""
Metrics definitions for ward-locator.

This module defines Prometheus metrics for monitoring
area detection and boundary authoring.
"""

from prometheus_client import Counter, Histogram

# 카운터 메트릭
detections_total = Counter(
    "ward_detections_total",
    "Number of area detections by outcome",
    ["outcome"]
)

boundary_decode_failures = Counter(
    "ward_boundary_decode_failures_total",
    "Zone boundaries skipped because the stored JSON could not be decoded",
    ["kind"]
)

overlapping_wards = Counter(
    "ward_overlapping_matches_total",
    "Detections where more than one ward polygon contained the point"
)

boundaries_prepared = Counter(
    "ward_boundaries_prepared_total",
    "Boundaries validated and simplified for storage",
    ["result"]
)

# 히스토그램 메트릭
detection_seconds = Histogram(
    "ward_detection_seconds",
    "Time spent resolving a coordinate to a ward",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1)
)

invalid_centroids = Counter(
    "ward_invalid_centroids_total",
    "Zones left out of nearest-centroid search because the stored center is out of range",
    ["kind"]
)
