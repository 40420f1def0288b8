"""
Error types for ward-locator.

Detection itself never raises for data-quality problems in the
zone list; these errors surface at the codec and authoring seams.
"""

from typing import List


class WardLocatorError(Exception):
    """ward-locator 기본 예외"""


class BoundaryDecodeError(WardLocatorError):
    """저장된 경계 JSON 텍스트를 해석할 수 없을 때 발생합니다."""


class BoundaryValidationError(WardLocatorError):
    """경계 폴리곤이 검증을 통과하지 못했을 때 발생합니다."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid boundary")


class InvalidCoordinateError(WardLocatorError):
    """탐지 입력 좌표가 유효하지 않을 때 발생합니다."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid coordinate")
