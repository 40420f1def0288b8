"""
Boundary validation for ward-locator.

Well-formedness checks used before a boundary is persisted or a
coordinate is handed to detection. Every check accumulates all of
its violations so an editor can show the complete list at once.
"""

import json
import math
from numbers import Real
from typing import Any, List, Optional

from ward_locator.core.models import ValidationReport

MIN_POLYGON_POINTS = 3

def _is_number(value: Any) -> bool:
    return (isinstance(value, Real) and not isinstance(value, bool)
            and math.isfinite(value))

def validate_coordinate(lat: Any, lng: Any) -> ValidationReport:
    """
    단일 좌표를 검증합니다.

    Args:
        lat: 위도
        lng: 경도

    Returns:
        검증 결과 (위반 사항 전체 포함)
    """
    errors: List[str] = []

    if not _is_number(lat):
        errors.append("Invalid latitude: must be a number")
    elif lat < -90 or lat > 90:
        errors.append("Invalid latitude: must be between -90 and 90")

    if not _is_number(lng):
        errors.append("Invalid longitude: must be a number")
    elif lng < -180 or lng > 180:
        errors.append("Invalid longitude: must be between -180 and 180")

    return ValidationReport.from_errors(errors)

def validate_polygon(polygon: Optional[Any]) -> ValidationReport:
    """
    폴리곤 꼭짓점 목록을 검증합니다.

    검사 항목:
    - 꼭짓점이 3개 이상인지
    - 각 꼭짓점이 [lat, lng] 숫자 쌍인지
    - 위도가 [-90, 90] 범위인지
    - 경도가 [-180, 180] 범위인지

    첫 오류에서 멈추지 않고 모든 위반 사항을 누적합니다.
    """
    errors: List[str] = []

    if polygon is None or isinstance(polygon, (str, bytes, dict)):
        return ValidationReport.from_errors(["Polygon must have at least 3 points"])

    try:
        points = list(polygon)
    except TypeError:
        return ValidationReport.from_errors(["Polygon must have at least 3 points"])

    if len(points) < MIN_POLYGON_POINTS:
        errors.append("Polygon must have at least 3 points")

    for i, point in enumerate(points):
        if point is None:
            errors.append(f"Invalid coordinate at index {i}: missing value")
            continue

        if isinstance(point, (str, bytes, dict)) or not hasattr(point, "__len__") or len(point) != 2:
            errors.append(f"Invalid coordinate at index {i}: must be a [lat, lng] pair")
            continue

        lat, lng = point
        if not _is_number(lat) or not _is_number(lng):
            errors.append(f"Invalid coordinate at index {i}: must be numbers")
            continue

        if lat < -90 or lat > 90:
            errors.append(f"Invalid latitude at index {i}: must be between -90 and 90")

        if lng < -180 or lng > 180:
            errors.append(f"Invalid longitude at index {i}: must be between -180 and 180")

    return ValidationReport.from_errors(errors)

def validate_boundary_text(text: Optional[str]) -> ValidationReport:
    """
    저장 전 경계 JSON 텍스트를 검증합니다.

    JSON 파싱, 배열 여부를 확인한 뒤 validate_polygon 검사를 적용합니다.
    """
    if text is None or not str(text).strip():
        return ValidationReport.from_errors(["Invalid boundaries: value is required"])

    try:
        data = json.loads(text)
    except (TypeError, ValueError):
        return ValidationReport.from_errors(["Invalid boundaries: must be valid JSON"])

    if not isinstance(data, list):
        return ValidationReport.from_errors(
            ["Invalid boundaries: must be an array of coordinate pairs"]
        )

    return validate_polygon(data)
