"""
Area locator feature for ward-locator.

This module wires the loaded ward list, settings and a decoding cache
together for the complaint-submission and location-picker workflows.
"""

from typing import Any, List, Optional, Sequence

from ward_locator.core.boundary import BoundaryCache
from ward_locator.core.detection import resolve_location_area
from ward_locator.core.errors import InvalidCoordinateError
from ward_locator.core.models import AreaResolution, Coordinate, Ward
from ward_locator.core.validation import validate_coordinate
from ward_locator.features.zone_loader import load_wards
from ward_locator.observability.logging_setup import get_logger, setup_logging_dev
from ward_locator.settings import Settings, build_settings

log = get_logger("ward_locator.locator")

class AreaLocator:
    """좌표 → ward/sub-zone 탐지 클래스"""

    def __init__(self, settings: Optional[Settings] = None,
                 wards: Optional[Sequence[Ward]] = None,
                 path: Optional[str] = None):
        """
        초기화합니다.

        Args:
            settings: 탐지 설정
            wards: 미리 로드된 ward 목록
            path: ward JSON 파일 경로 (wards 가 없을 때 지연 로드)
        """
        self.settings = settings or Settings()
        self.path = path
        self._wards: List[Ward] = list(wards or [])
        self._cache = BoundaryCache()

        log.info(f"AreaLocator 초기화됨 wards:{len(self._wards)} path:{path}")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AreaLocator":
        """
        설정(기본: 환경변수)으로 로깅을 초기화하고 AreaLocator 를 만듭니다.

        ward 데이터는 settings.data.wards_path 에서 첫 탐지 시 지연 로드됩니다.
        """
        settings = settings or build_settings()
        setup_logging_dev(settings.observability.log_level,
                          service_name=settings.observability.service_name)
        return cls(settings, path=settings.data.wards_path or None)

    @property
    def wards(self) -> List[Ward]:
        return self._wards

    def load(self):
        """ward 데이터를 파일에서 (다시) 로드합니다."""
        if not self.path:
            raise ValueError("ward 데이터 경로가 설정되지 않았습니다")
        self.replace_wards(load_wards(self.path))

    def replace_wards(self, wards: Sequence[Ward]):
        """ward 목록을 교체하고 디코딩 캐시를 비웁니다."""
        self._wards = list(wards)
        self._cache.clear()

    def locate(self, lat: Any, lng: Any) -> AreaResolution:
        """
        좌표가 속한 구역을 찾습니다.

        좌표는 탐지 전에 검증되며, 잘못된 좌표는 탐지 도중이 아니라
        여기서 InvalidCoordinateError 로 드러납니다.
        """
        report = validate_coordinate(lat, lng)
        if not report.is_valid:
            raise InvalidCoordinateError(report.errors)

        if not self._wards and self.path:
            self.load()

        return resolve_location_area(
            Coordinate(lat=lat, lng=lng),
            self._wards,
            use_nearest_fallback=self.settings.detection.nearest_fallback,
            check_overlaps=self.settings.detection.warn_on_overlap,
            cache=self._cache,
        )
