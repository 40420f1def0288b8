"""
테스트 설정 및 픽스처

이 모듈은 pytest 설정과 공통 픽스처를 제공합니다.
"""

import json
import os
import tempfile

import pytest

from ward_locator.core.models import Coordinate, SubZone, Ward
from ward_locator.settings import Settings


def square(south, west, north, east):
    """[lat, lng] 사각형 폴리곤"""
    return [[south, west], [south, east], [north, east], [north, west]]


@pytest.fixture
def temp_file_path():
    """임시 파일 경로"""
    with tempfile.NamedTemporaryFile(suffix='.json', delete=False) as f:
        temp_path = f.name
    yield temp_path
    # 테스트 후 파일 정리
    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def sample_settings():
    """테스트용 설정"""
    settings = Settings()
    settings.observability.service_name = "test-service"
    settings.observability.log_level = "INFO"
    return settings


@pytest.fixture
def unit_square():
    """단위 정사각형 [[0,0],[0,1],[1,1],[1,0]]"""
    return [[0, 0], [0, 1], [1, 1], [1, 0]]


@pytest.fixture
def beach_area():
    """Fort Kochi 내부 sub-zone"""
    return SubZone(
        id="sz-beach",
        name="Beach Area",
        ward_id="ward-fk",
        boundaries=json.dumps(square(9.932, 76.262, 9.938, 76.268)),
        center_lat=9.935,
        center_lng=76.265,
    )


@pytest.fixture
def market_area():
    """Fort Kochi 내부 다른 sub-zone (북동쪽)"""
    return SubZone(
        id="sz-market",
        name="Market Area",
        ward_id="ward-fk",
        boundaries=json.dumps(square(9.938, 76.268, 9.94, 76.27)),
        center_lat=9.939,
        center_lng=76.269,
    )


@pytest.fixture
def fort_kochi(beach_area, market_area):
    """테스트용 Fort Kochi ward"""
    return Ward(
        id="ward-fk",
        name="Fort Kochi",
        boundaries=json.dumps([[9.93, 76.26], [9.93, 76.27], [9.94, 76.27], [9.94, 76.26]]),
        bounding_box=json.dumps({"north": 9.94, "south": 9.93, "east": 76.27, "west": 76.26}),
        center_lat=9.935,
        center_lng=76.265,
        sub_zones=[market_area, beach_area],
    )


@pytest.fixture
def mattancherry():
    """Fort Kochi 동쪽에 인접한 ward"""
    return Ward(
        id="ward-mt",
        name="Mattancherry",
        boundaries=json.dumps(square(9.93, 76.27, 9.95, 76.29)),
        center_lat=9.94,
        center_lng=76.28,
    )


@pytest.fixture
def wards(fort_kochi, mattancherry):
    """테스트용 ward 목록"""
    return [fort_kochi, mattancherry]


@pytest.fixture
def inside_beach():
    """Beach Area 내부 좌표"""
    return Coordinate(lat=9.935, lng=76.265)


# pytest 설정
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: 느린 테스트 마커"
    )
    config.addinivalue_line(
        "markers", "integration: 통합 테스트 마커"
    )


def pytest_collection_modifyitems(config, items):
    """테스트 아이템 수정"""
    for item in items:
        # 느린 테스트 마커 추가
        if "performance" in item.name or "stress" in item.name:
            item.add_marker(pytest.mark.slow)

        # 통합 테스트 마커 추가
        if "integration" in item.name:
            item.add_marker(pytest.mark.integration)
