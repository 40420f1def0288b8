"""
Geometry primitives for ward-locator.

This module provides the pure geometric calculations used by
area detection: ray-casting point-in-polygon, bounding box tests,
Haversine distance, polygon centroid and bounding box.

Polygons are sequences of [lat, lng] pairs. The ring is implicitly
closed; the first point does not need to be repeated at the end.
"""

import math
from numbers import Real
from typing import Any, Optional, Sequence, Tuple

from ward_locator.core.models import BoundingBox, Coordinate

# 지구 반지름 (킬로미터)
EARTH_RADIUS_KM = 6371.0

def as_vertex(value: Any) -> Optional[Tuple[float, float]]:
    """
    폴리곤 항목을 (위도, 경도) 튜플로 변환합니다.

    누락되었거나 [lat, lng] 숫자 쌍이 아닌 항목은 None 을 반환합니다.
    """
    if value is None or isinstance(value, (str, bytes)):
        return None
    try:
        if len(value) != 2:
            return None
        lat, lng = value
    except TypeError:
        return None
    for v in (lat, lng):
        if isinstance(v, bool) or not isinstance(v, Real) or not math.isfinite(v):
            return None
    return float(lat), float(lng)

def point_in_polygon(point: Coordinate, polygon: Sequence[Any]) -> bool:
    """
    점이 폴리곤 내부에 있는지 Ray casting (even-odd) 알고리즘으로 확인합니다.

    경계선 위의 점은 구현 정의 동작입니다: 최소 경도/최소 위도 쪽 변 위의
    점은 내부, 최대 경도/최대 위도 쪽 변 위의 점은 외부로 판정됩니다.
    누락되거나 잘못된 꼭짓점에 닿는 변은 건너뜁니다.

    Args:
        point: 확인할 좌표
        polygon: 폴리곤의 꼭짓점들 [[lat, lng], ...]

    Returns:
        점이 폴리곤 내부에 있으면 True
    """
    lat, lng = point.lat, point.lng
    inside = False

    n = len(polygon)
    j = n - 1
    for i in range(n):
        vi = as_vertex(polygon[i])
        vj = as_vertex(polygon[j])
        j = i
        if vi is None or vj is None:
            continue
        lat_i, lng_i = vi
        lat_j, lng_j = vj

        # 수평 변(lng_i == lng_j)은 엄격 부등호 때문에 자연스럽게 제외됨
        if (lng_i > lng) != (lng_j > lng):
            cross_lat = (lat_j - lat_i) * (lng - lng_i) / (lng_j - lng_i) + lat_i
            if lat < cross_lat:
                inside = not inside

    return inside

def point_in_bounding_box(point: Coordinate, box: BoundingBox) -> bool:
    """
    점이 경계 상자 안에 있는지 확인합니다 (경계 포함).

    뒤집힌 상자(north < south 등)는 모든 점을 거부합니다.
    """
    return (
        box.south <= point.lat <= box.north
        and box.west <= point.lng <= box.east
    )

def haversine_distance_km(a: Coordinate, b: Coordinate) -> float:
    """
    두 좌표 간의 Haversine 거리를 계산합니다 (킬로미터).

    Args:
        a: 첫 번째 좌표
        b: 두 번째 좌표

    Returns:
        두 지점 간의 대권 거리 (킬로미터)
    """
    lat1_rad = math.radians(a.lat)
    lat2_rad = math.radians(b.lat)
    dlat = math.radians(b.lat - a.lat)
    dlng = math.radians(b.lng - a.lng)

    h = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlng / 2) ** 2)
    # 대척점 근처에서 반올림으로 1을 넘을 수 있음
    h = min(1.0, h)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c

def _vertices(polygon: Sequence[Any]) -> list:
    vertices = [v for v in (as_vertex(p) for p in polygon) if v is not None]
    if not vertices:
        raise ValueError("polygon has no valid vertices")
    return vertices

def polygon_centroid(polygon: Sequence[Any]) -> Coordinate:
    """
    폴리곤의 중심 좌표를 계산합니다.

    면적 가중 중심이 아닌 꼭짓점 산술 평균입니다. 대략 볼록하고 작은
    폴리곤(구 단위)에서는 충분하지만 지도학적으로 정확한 중심은 아닙니다.

    Raises:
        ValueError: 유효한 꼭짓점이 하나도 없을 때
    """
    vertices = _vertices(polygon)
    lat = sum(v[0] for v in vertices) / len(vertices)
    lng = sum(v[1] for v in vertices) / len(vertices)
    return Coordinate(lat=lat, lng=lng)

def polygon_bounding_box(polygon: Sequence[Any]) -> BoundingBox:
    """
    폴리곤의 경계 상자를 계산합니다.

    Raises:
        ValueError: 유효한 꼭짓점이 하나도 없을 때
    """
    vertices = _vertices(polygon)
    lats = [v[0] for v in vertices]
    lngs = [v[1] for v in vertices]

    return BoundingBox(
        north=max(lats),
        south=min(lats),
        east=max(lngs),
        west=min(lngs),
    )
