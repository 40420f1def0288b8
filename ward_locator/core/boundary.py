"""
Boundary codec for ward-locator.

Zone boundaries and bounding boxes are stored by the surrounding
system as JSON-encoded text columns:

    boundaries:  "[[9.93, 76.26], [9.93, 76.27], ...]"   ([lat, lng] pairs)
    boundingBox: '{"north": 9.94, "south": 9.93, "east": 76.27, "west": 76.26}'

This module decodes and encodes that convention.
"""

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from ward_locator.core.errors import BoundaryDecodeError
from ward_locator.core.geometry import as_vertex
from ward_locator.core.models import BoundingBox

Vertex = Optional[Tuple[float, float]]

def _loads(text: Any, what: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise BoundaryDecodeError(f"{what} is not valid JSON: {e}") from e

def decode_polygon(text: str) -> List[Vertex]:
    """
    경계 JSON 텍스트를 꼭짓점 목록으로 변환합니다.

    JSON null 항목은 None 으로 유지됩니다 (희소한 원본 데이터 허용).
    그 외 [lat, lng] 숫자 쌍이 아닌 항목은 잘못된 형상으로 간주합니다.

    Raises:
        BoundaryDecodeError: JSON 이 아니거나 형상이 잘못되었을 때
    """
    data = _loads(text, "boundaries")
    if not isinstance(data, list):
        raise BoundaryDecodeError(
            f"boundaries must be a JSON array, got {type(data).__name__}"
        )

    vertices: List[Vertex] = []
    for i, item in enumerate(data):
        if item is None:
            vertices.append(None)
            continue
        vertex = as_vertex(item)
        if vertex is None:
            raise BoundaryDecodeError(
                f"boundaries[{i}] is not a [lat, lng] number pair: {item!r}"
            )
        vertices.append(vertex)
    return vertices

def decode_bounding_box(text: str) -> BoundingBox:
    """
    경계 상자 JSON 텍스트를 BoundingBox 로 변환합니다.

    Raises:
        BoundaryDecodeError: JSON 이 아니거나 north/south/east/west 가 없을 때
    """
    data = _loads(text, "boundingBox")
    try:
        return BoundingBox.model_validate(data)
    except ValidationError as e:
        raise BoundaryDecodeError(f"invalid boundingBox: {e.error_count()} error(s)") from e

def encode_polygon(polygon: Sequence[Sequence[float]]) -> str:
    """꼭짓점 목록을 저장 형식 ([[lat, lng], ...]) JSON 텍스트로 변환합니다."""
    return json.dumps([[float(p[0]), float(p[1])] for p in polygon], separators=(",", ":"))

def encode_bounding_box(box: BoundingBox) -> str:
    """BoundingBox 를 저장 형식 JSON 텍스트로 변환합니다."""
    return json.dumps(box.model_dump(), separators=(",", ":"))

class BoundaryCache:
    """
    호출자가 소유하는 경계 디코딩 캐시.

    원본 텍스트를 키로 디코딩 결과를 보관합니다. 같은 구역 목록으로
    여러 번 탐지할 때 JSON 파싱을 반복하지 않도록 합니다.
    디코딩 실패는 캐시하지 않습니다.
    """

    def __init__(self):
        self._polygons: Dict[str, Tuple[Vertex, ...]] = {}
        self._boxes: Dict[str, BoundingBox] = {}

    def polygon(self, text: str) -> Tuple[Vertex, ...]:
        cached = self._polygons.get(text)
        if cached is None:
            cached = tuple(decode_polygon(text))
            self._polygons[text] = cached
        return cached

    def bounding_box(self, text: str) -> BoundingBox:
        cached = self._boxes.get(text)
        if cached is None:
            cached = decode_bounding_box(text)
            self._boxes[text] = cached
        return cached

    def clear(self) -> None:
        self._polygons.clear()
        self._boxes.clear()

    def __len__(self) -> int:
        return len(self._polygons) + len(self._boxes)
