"""
Validation 모듈 단위 테스트

이 모듈은 좌표, 폴리곤, 경계 JSON 텍스트 검증을 테스트합니다.
"""

import json
import pytest

from ward_locator.core.validation import validate_boundary_text, validate_coordinate, validate_polygon


class TestValidatePolygon:
    """폴리곤 검증 테스트"""

    def test_valid_polygon(self, unit_square):
        report = validate_polygon(unit_square)
        assert report.is_valid is True
        assert report.errors == []

    def test_too_few_points(self):
        report = validate_polygon([[0, 0]])
        assert report.is_valid is False
        assert any("at least 3 points" in e for e in report.errors)

    def test_latitude_out_of_range(self):
        report = validate_polygon([[95, 0], [0, 0], [0, 0]])
        assert report.is_valid is False
        assert report.errors == ["Invalid latitude at index 0: must be between -90 and 90"]

    def test_longitude_out_of_range(self):
        report = validate_polygon([[0, 0], [0, 181], [0, -180]])
        assert report.errors == ["Invalid longitude at index 1: must be between -180 and 180"]

    def test_accumulates_all_errors(self):
        """첫 오류에서 멈추지 않음"""
        report = validate_polygon([[95, 200], None])
        assert report.is_valid is False
        assert report.errors == [
            "Polygon must have at least 3 points",
            "Invalid latitude at index 0: must be between -90 and 90",
            "Invalid longitude at index 0: must be between -180 and 180",
            "Invalid coordinate at index 1: missing value",
        ]

    @pytest.mark.parametrize("point", [["a", 1], [1, None], [True, 1], [float("nan"), 0]])
    def test_non_numeric(self, point):
        report = validate_polygon([[0, 0], [0, 1], point])
        assert report.errors == ["Invalid coordinate at index 2: must be numbers"]

    @pytest.mark.parametrize("point", [[1], [1, 2, 3], "ab", {"lat": 1, "lng": 2}, 7])
    def test_not_a_pair(self, point):
        report = validate_polygon([[0, 0], [0, 1], point])
        assert report.errors == ["Invalid coordinate at index 2: must be a [lat, lng] pair"]

    @pytest.mark.parametrize("polygon", [None, [], "[[0,0]]", 42])
    def test_missing_polygon(self, polygon):
        report = validate_polygon(polygon)
        assert report.is_valid is False
        assert "Polygon must have at least 3 points" in report.errors

    def test_tuples_accepted(self):
        assert validate_polygon([(9.93, 76.26), (9.93, 76.27), (9.94, 76.27)]).is_valid


class TestValidateCoordinate:
    """좌표 검증 테스트"""

    def test_valid(self):
        assert validate_coordinate(9.9312, 76.2673).is_valid

    def test_edges_are_valid(self):
        assert validate_coordinate(-90, 180).is_valid
        assert validate_coordinate(90, -180).is_valid

    def test_out_of_range(self):
        report = validate_coordinate(91, -181)
        assert report.errors == [
            "Invalid latitude: must be between -90 and 90",
            "Invalid longitude: must be between -180 and 180",
        ]

    def test_non_numeric(self):
        report = validate_coordinate("9.9", None)
        assert report.errors == [
            "Invalid latitude: must be a number",
            "Invalid longitude: must be a number",
        ]


class TestValidateBoundaryText:
    """저장 전 경계 텍스트 검증 테스트"""

    def test_valid_text(self, unit_square):
        assert validate_boundary_text(json.dumps(unit_square)).is_valid

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_missing(self, text):
        assert validate_boundary_text(text).errors == ["Invalid boundaries: value is required"]

    def test_invalid_json(self):
        assert validate_boundary_text("[[0,0],").errors == ["Invalid boundaries: must be valid JSON"]

    def test_not_an_array(self):
        assert validate_boundary_text('{"a": 1}').errors == [
            "Invalid boundaries: must be an array of coordinate pairs"
        ]

    def test_polygon_checks_apply(self):
        report = validate_boundary_text("[[0, 0], [0, 1]]")
        assert report.errors == ["Polygon must have at least 3 points"]
