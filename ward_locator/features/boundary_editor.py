"""
Boundary preparation for ward-locator.

Turns a polygon drawn in the ward editor into the column values the
ward/sub-zone tables store: simplified boundary JSON, bounding box
JSON and centroid.
"""

from typing import Any, Optional, Sequence
from pydantic import BaseModel, Field

from ward_locator.core.boundary import encode_bounding_box, encode_polygon
from ward_locator.core.errors import BoundaryValidationError
from ward_locator.core.geometry import polygon_bounding_box, polygon_centroid
from ward_locator.core.simplify import simplify_polygon
from ward_locator.core.validation import MIN_POLYGON_POINTS, validate_polygon
from ward_locator.observability import metrics
from ward_locator.observability.logging_setup import get_logger
from ward_locator.settings import Settings

log = get_logger("ward_locator.boundary")

class PreparedBoundary(BaseModel):
    """저장용으로 준비된 경계 값"""
    boundaries: str
    bounding_box: str = Field(serialization_alias="boundingBox")
    center_lat: float = Field(serialization_alias="centerLat")
    center_lng: float = Field(serialization_alias="centerLng")
    vertex_count: int
    original_vertex_count: int

    def to_record(self) -> dict:
        """저장 계층 컬럼 이름(camelCase)으로 변환합니다."""
        return self.model_dump(by_alias=True, include={"boundaries", "bounding_box", "center_lat", "center_lng"})

def prepare_boundary(
    polygon: Sequence[Any],
    tolerance: Optional[float] = None,
    *,
    settings: Optional[Settings] = None,
) -> PreparedBoundary:
    """
    편집기에서 그린 폴리곤을 검증, 단순화하고 저장 형식으로 변환합니다.

    단순화 결과가 3개 미만의 꼭짓점이 되면 원본 폴리곤을 유지합니다.
    중심점과 경계 상자는 저장되는 (단순화된) 폴리곤 기준으로 계산합니다.

    Args:
        polygon: [[lat, lng], ...] 꼭짓점 목록
        tolerance: 단순화 허용 오차 (도). None 이면 설정값 사용
        settings: 설정 (기본값 Settings())

    Returns:
        PreparedBoundary

    Raises:
        BoundaryValidationError: 폴리곤 검증 실패 시 (전체 오류 목록 포함)
    """
    report = validate_polygon(polygon)
    if not report.is_valid:
        metrics.boundaries_prepared.labels(result="invalid").inc()
        log.warning(f"경계 검증 실패 errors:{report.errors}")
        raise BoundaryValidationError(report.errors)

    if tolerance is None:
        tolerance = (settings or Settings()).detection.simplify_tolerance_deg

    points = [(float(p[0]), float(p[1])) for p in polygon]
    simplified = simplify_polygon(points, tolerance)
    if len(simplified) < MIN_POLYGON_POINTS:
        log.info(f"단순화 결과 꼭짓점 부족, 원본 유지 vertices:{len(simplified)} tolerance:{tolerance}")
        simplified = points

    center = polygon_centroid(simplified)
    box = polygon_bounding_box(simplified)

    metrics.boundaries_prepared.labels(result="ok").inc()
    log.debug(f"경계 준비 완료 vertices:{len(points)}->{len(simplified)}")

    return PreparedBoundary(
        boundaries=encode_polygon(simplified),
        bounding_box=encode_bounding_box(box),
        center_lat=center.lat,
        center_lng=center.lng,
        vertex_count=len(simplified),
        original_vertex_count=len(points),
    )
