"""
Zone loading for ward-locator.

This module loads ward records (with nested sub-zones) from a JSON
export of the ward boundary listing, either a bare list of wards or
the API envelope {"success": true, "data": [...]}.
"""

import json
import os
from typing import Any, List

from pydantic import ValidationError

from ward_locator.core.models import Ward
from ward_locator.observability.logging_setup import get_logger

log = get_logger("ward_locator.zones")

def parse_wards(payload: Any) -> List[Ward]:
    """
    ward 레코드 목록을 Ward 모델로 변환합니다.

    잘못된 레코드는 경고를 남기고 건너뜁니다.

    Raises:
        ValueError: payload 가 ward 목록이 아닐 때
    """
    if isinstance(payload, dict) and "data" in payload:
        payload = payload["data"]
    if not isinstance(payload, list):
        raise ValueError("ward 데이터는 목록이어야 합니다")

    wards: List[Ward] = []
    for idx, record in enumerate(payload):
        try:
            wards.append(Ward.model_validate(record))
        except ValidationError as e:
            name = record.get("name") if isinstance(record, dict) else None
            log.warning(f"레코드 {idx} ward 변환 오류 건너뜀 name:{name} errors:{e.error_count()}")
            continue
    return wards

def load_wards(path: str) -> List[Ward]:
    """ward 데이터를 JSON 파일에서 로드합니다."""
    ext = os.path.splitext(path)[1].lower()
    if ext != ".json":
        raise ValueError("지원하지 않는 파일 형식")

    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    wards = parse_wards(payload)
    sub_zone_count = sum(len(w.sub_zones) for w in wards)
    log.info(f"ward 데이터 로드됨 path:{path} wards:{len(wards)} sub_zones:{sub_zone_count}")
    return wards
