"""
Core domain models for ward-locator.

This module defines the zone records and detection results
using Pydantic v2. Zone boundaries stay in the storage layer's
JSON-in-text-column form; they are decoded on demand.
"""

import math
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

# [lat, lng] 쌍의 나열
Polygon = List[List[float]]

class Coordinate(BaseModel):
    """위경도 좌표 (불변)"""
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

class BoundingBox(BaseModel):
    """축 정렬 경계 상자. north >= south, east >= west 는 강제하지 않음"""
    north: float
    south: float
    east: float
    west: float

class Zone(BaseModel):
    """구역 공통 필드 (Ward / SubZone)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    boundaries: Optional[str] = None
    bounding_box: Optional[str] = Field(default=None, alias="boundingBox")
    center_lat: Optional[float] = Field(default=None, alias="centerLat")
    center_lng: Optional[float] = Field(default=None, alias="centerLng")

    @property
    def centroid(self) -> Optional[Coordinate]:
        """중심 좌표가 모두 있고 유효 범위 안이면 Coordinate, 아니면 None"""
        lat, lng = self.center_lat, self.center_lng
        if lat is None or lng is None:
            return None
        if not (math.isfinite(lat) and math.isfinite(lng)):
            return None
        if not (-90 <= lat <= 90 and -180 <= lng <= 180):
            return None
        return Coordinate(lat=lat, lng=lng)

class SubZone(Zone):
    """Ward 내부의 하위 구역"""
    ward_id: Optional[str] = Field(default=None, alias="wardId")

class Ward(Zone):
    """최상위 행정 구역"""
    sub_zones: List[SubZone] = Field(default_factory=list, alias="subZones")

class DetectionResult(BaseModel):
    """정확 일치 탐지 결과"""
    ward: Optional[Ward] = None
    sub_zone: Optional[SubZone] = None

class NearestAreaResult(BaseModel):
    """최근접 중심점 폴백 결과. 중심점이 하나도 없으면 distance_km 는 inf"""
    ward: Optional[Ward] = None
    sub_zone: Optional[SubZone] = None
    distance_km: float = math.inf

class AreaResolution(BaseModel):
    """정확 일치 + 최근접 폴백을 합친 결과"""
    coordinate: Coordinate
    exact: DetectionResult
    nearest: Optional[NearestAreaResult] = None
    method: Literal["exact", "nearest", "none"]

    @property
    def ward(self) -> Optional[Ward]:
        if self.method == "exact":
            return self.exact.ward
        if self.method == "nearest" and self.nearest is not None:
            return self.nearest.ward
        return None

    @property
    def sub_zone(self) -> Optional[SubZone]:
        if self.method == "exact":
            return self.exact.sub_zone
        if self.method == "nearest" and self.nearest is not None:
            return self.nearest.sub_zone
        return None

class ValidationReport(BaseModel):
    """검증 결과. 모든 위반 사항을 누적합니다."""
    is_valid: bool
    errors: List[str] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: List[str]) -> "ValidationReport":
        return cls(is_valid=not errors, errors=errors)
