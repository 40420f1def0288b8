"""
Polygon simplification for ward-locator.

Douglas-Peucker vertex reduction for boundaries drawn in the ward
editor. Coordinates are treated as planar (lat = x, lng = y) and the
tolerance is in raw degrees, not meters; this is adequate for
city-ward sized polygons but not for large or high-latitude areas.
"""

import math
from typing import Any, List, Sequence, Tuple

from ward_locator.core.geometry import as_vertex

DEFAULT_TOLERANCE_DEG = 0.0001

Point = Tuple[float, float]

def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """
    점에서 직선까지의 수직 거리를 계산합니다 (평면 근사).

    시작점과 끝점이 같으면(닫힌 링) 시작점까지의 거리를 반환합니다.
    """
    x0, y0 = point
    x1, y1 = line_start
    x2, y2 = line_end

    denominator = math.hypot(y2 - y1, x2 - x1)
    if denominator == 0:
        return math.hypot(x0 - x1, y0 - y1)

    numerator = abs((y2 - y1) * x0 - (x2 - x1) * y0 + x2 * y1 - y2 * x1)
    return numerator / denominator

def simplify_polygon(polygon: Sequence[Any], tolerance: float = DEFAULT_TOLERANCE_DEG) -> List[Point]:
    """
    Douglas-Peucker 알고리즘으로 폴리곤을 단순화합니다.

    재귀 대신 명시적 작업 스택을 사용하므로 꼭짓점 수가 많아도
    재귀 깊이 제한에 걸리지 않습니다. 결과는 재귀 구현과 동일합니다:
    구간 [lo, hi] 에서 현(chord)으로부터 가장 먼 점(동률이면 앞쪽)이
    tolerance 를 초과하면 유지하고 양쪽 구간을 다시 나눕니다.

    누락되었거나 잘못된 꼭짓점은 단순화 전에 제거됩니다.

    Args:
        polygon: [[lat, lng], ...] 꼭짓점 목록
        tolerance: 허용 오차 (도 단위, 0 이상)

    Returns:
        단순화된 꼭짓점 목록 (원본 꼭짓점의 부분열)

    Raises:
        ValueError: tolerance 가 음수이거나 유한하지 않을 때
    """
    if not math.isfinite(tolerance) or tolerance < 0:
        raise ValueError(f"tolerance must be a finite number >= 0, got {tolerance}")

    points = [v for v in (as_vertex(p) for p in polygon) if v is not None]
    n = len(points)
    if n <= 2:
        return points

    keep = [False] * n
    keep[0] = keep[n - 1] = True
    stack = [(0, n - 1)]

    while stack:
        lo, hi = stack.pop()
        if hi - lo < 2:
            continue

        start, end = points[lo], points[hi]
        max_distance = 0.0
        max_index = lo
        for i in range(lo + 1, hi):
            distance = perpendicular_distance(points[i], start, end)
            if distance > max_distance:
                max_distance = distance
                max_index = i

        if max_distance > tolerance:
            keep[max_index] = True
            stack.append((max_index, hi))
            stack.append((lo, max_index))

    return [p for p, k in zip(points, keep) if k]
