"""
Area detection for ward-locator.

Resolves a coordinate to the ward (and nested sub-zone) containing it.
Exact matching runs a cheap bounding-box pre-filter followed by the
ray-casting polygon test; when no ward contains the point, callers can
fall back to the ward whose centroid is nearest.

A corrupt boundary on one zone never aborts the search: the zone is
logged, counted and skipped.
"""

import math
from typing import Iterable, List, Optional, Sequence, TypeVar

from ward_locator.core.boundary import BoundaryCache, decode_bounding_box, decode_polygon
from ward_locator.core.errors import BoundaryDecodeError
from ward_locator.core.geometry import (
    haversine_distance_km,
    point_in_bounding_box,
    point_in_polygon,
)
from ward_locator.core.models import (
    AreaResolution,
    Coordinate,
    DetectionResult,
    NearestAreaResult,
    SubZone,
    Ward,
    Zone,
)
from ward_locator.observability import metrics
from ward_locator.observability.logging_setup import get_logger

log = get_logger("ward_locator.detection")

Z = TypeVar("Z", bound=Zone)

def zone_contains(
    coordinate: Coordinate,
    zone: Zone,
    *,
    cache: Optional[BoundaryCache] = None,
) -> bool:
    """
    구역 경계가 좌표를 포함하는지 확인합니다.

    경계가 없는 구역은 False 입니다. 경계 상자가 있으면 먼저 상자로
    걸러내고, 통과한 경우에만 폴리곤 검사를 수행합니다.

    Raises:
        BoundaryDecodeError: 저장된 경계 JSON 을 해석할 수 없을 때
    """
    if not zone.boundaries:
        return False

    if cache is not None:
        polygon = cache.polygon(zone.boundaries)
    else:
        polygon = decode_polygon(zone.boundaries)

    if zone.bounding_box:
        if cache is not None:
            box = cache.bounding_box(zone.bounding_box)
        else:
            box = decode_bounding_box(zone.bounding_box)
        if not point_in_bounding_box(coordinate, box):
            return False

    return point_in_polygon(coordinate, polygon)

def _first_containing(
    coordinate: Coordinate,
    zones: Iterable[Z],
    kind: str,
    cache: Optional[BoundaryCache],
) -> Optional[Z]:
    for zone in zones:
        try:
            if zone_contains(coordinate, zone, cache=cache):
                return zone
        except BoundaryDecodeError as e:
            log.warning(f"{kind} 경계 파싱 실패, 건너뜀 name:{zone.name} id:{zone.id} error:{e}")
            metrics.boundary_decode_failures.labels(kind=kind).inc()
    return None

def _with_sub_zone(
    coordinate: Coordinate,
    ward: Optional[Ward],
    cache: Optional[BoundaryCache],
) -> DetectionResult:
    sub_zone: Optional[SubZone] = None
    if ward is not None and ward.sub_zones:
        sub_zone = _first_containing(coordinate, ward.sub_zones, "sub_zone", cache)

    log.debug("정확 일치 탐지 완료",
              lat=coordinate.lat,
              lng=coordinate.lng,
              ward=ward.name if ward else None,
              sub_zone=sub_zone.name if sub_zone else None)

    return DetectionResult(ward=ward, sub_zone=sub_zone)

def detect_location_area(
    coordinate: Coordinate,
    wards: Sequence[Ward],
    *,
    cache: Optional[BoundaryCache] = None,
) -> DetectionResult:
    """
    좌표가 속한 ward 와 sub-zone 을 찾습니다.

    ward 는 주어진 순서대로 검사하며 처음 일치한 ward 에서 멈춥니다.
    ward 폴리곤이 겹치는 잘못된 데이터에서는 결과가 순서에 의존합니다.
    일치한 ward 의 sub-zone 들도 같은 방식으로 검사합니다.

    Args:
        coordinate: 탐지할 좌표
        wards: sub-zone 을 포함한 ward 목록
        cache: 선택적 경계 디코딩 캐시

    Returns:
        DetectionResult. 일치하는 ward 가 없으면 ward, sub_zone 모두 None
    """
    ward = _first_containing(coordinate, wards, "ward", cache)
    return _with_sub_zone(coordinate, ward, cache)

def _usable_centroid(zone: Zone, kind: str) -> Optional[Coordinate]:
    center = zone.centroid
    if center is None and zone.center_lat is not None and zone.center_lng is not None:
        log.warning(f"{kind} 중심점이 유효하지 않음, 건너뜀 name:{zone.name} id:{zone.id} "
                    f"center:({zone.center_lat}, {zone.center_lng})")
        metrics.invalid_centroids.labels(kind=kind).inc()
    return center

def find_nearest_area(coordinate: Coordinate, wards: Sequence[Ward]) -> NearestAreaResult:
    """
    중심점 거리 기준으로 가장 가까운 ward 와 sub-zone 을 찾습니다.

    중심점이 없거나 범위를 벗어난 ward/sub-zone 은 후보에서 제외됩니다. 거리가 같으면
    먼저 나온 구역이 선택됩니다. sub-zone 은 선택된 ward 의 것만
    고려하므로 결과는 항상 일관됩니다.

    Returns:
        NearestAreaResult. 중심점이 있는 ward 가 없으면 distance_km 는 inf
    """
    nearest_ward: Optional[Ward] = None
    nearest_sub_zone: Optional[SubZone] = None
    min_distance = math.inf

    for ward in wards:
        center = _usable_centroid(ward, "ward")
        if center is None:
            continue

        distance = haversine_distance_km(coordinate, center)
        if distance < min_distance:
            min_distance = distance
            nearest_ward = ward
            # ward 가 바뀌면 sub-zone 도 초기화
            nearest_sub_zone = None

            min_sub_distance = math.inf
            for sub_zone in ward.sub_zones:
                sub_center = _usable_centroid(sub_zone, "sub_zone")
                if sub_center is None:
                    continue
                sub_distance = haversine_distance_km(coordinate, sub_center)
                if sub_distance < min_sub_distance:
                    min_sub_distance = sub_distance
                    nearest_sub_zone = sub_zone

    return NearestAreaResult(
        ward=nearest_ward,
        sub_zone=nearest_sub_zone,
        distance_km=min_distance,
    )

def find_containing_wards(
    coordinate: Coordinate,
    wards: Sequence[Ward],
    *,
    cache: Optional[BoundaryCache] = None,
) -> List[Ward]:
    """
    좌표를 포함하는 모든 ward 를 반환합니다 (데이터 품질 점검용).

    둘 이상이면 ward 폴리곤이 겹친다는 뜻이므로 경고를 남깁니다.
    detect_location_area 의 첫 일치 동작에는 영향을 주지 않습니다.
    """
    matches: List[Ward] = []
    for ward in wards:
        try:
            if zone_contains(coordinate, ward, cache=cache):
                matches.append(ward)
        except BoundaryDecodeError as e:
            log.warning(f"ward 경계 파싱 실패, 건너뜀 name:{ward.name} id:{ward.id} error:{e}")
            metrics.boundary_decode_failures.labels(kind="ward").inc()

    if len(matches) > 1:
        metrics.overlapping_wards.inc()
        log.warning(f"ward 폴리곤 중첩 감지 lat:{coordinate.lat} lng:{coordinate.lng} "
                    f"wards:{[w.name for w in matches]}")
    return matches

def resolve_location_area(
    coordinate: Coordinate,
    wards: Sequence[Ward],
    *,
    use_nearest_fallback: bool = True,
    check_overlaps: bool = False,
    cache: Optional[BoundaryCache] = None,
) -> AreaResolution:
    """
    정확 일치를 먼저 시도하고, 실패하면 최근접 중심점으로 폴백합니다.

    check_overlaps 가 True 이면 모든 ward 를 한 번에 검사해 중첩을 점검하고,
    그중 첫 일치를 정확 일치 결과로 사용합니다.

    Returns:
        AreaResolution. method 는 "exact", "nearest", "none" 중 하나
    """
    with metrics.detection_seconds.time():
        if check_overlaps:
            # 경계 파싱 실패가 ward 당 한 번만 보고되도록 단일 패스
            matches = find_containing_wards(coordinate, wards, cache=cache)
            exact = _with_sub_zone(coordinate, matches[0] if matches else None, cache)
        else:
            exact = detect_location_area(coordinate, wards, cache=cache)

        nearest: Optional[NearestAreaResult] = None
        if exact.ward is not None:
            method = "exact"
        else:
            if use_nearest_fallback:
                nearest = find_nearest_area(coordinate, wards)
            method = "nearest" if nearest is not None and nearest.ward is not None else "none"

    metrics.detections_total.labels(outcome=method).inc()
    if method == "nearest":
        log.info(f"정확 일치 없음, 최근접 ward 사용 ward:{nearest.ward.name} "
                 f"distance:{nearest.distance_km:.2f}km")
    elif method == "none":
        log.info(f"ward 탐지 실패 lat:{coordinate.lat} lng:{coordinate.lng}")

    return AreaResolution(
        coordinate=coordinate,
        exact=exact,
        nearest=nearest,
        method=method,
    )
