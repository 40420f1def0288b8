# ward_locator/settings.py
from __future__ import annotations
import os
from pydantic import BaseModel, Field

class Detection(BaseModel):
    simplify_tolerance_deg: float = 0.0001    # 도 단위 (미터 아님)
    nearest_fallback: bool = True
    warn_on_overlap: bool = True

class Data(BaseModel):
    wards_path: str = ""                      # ward JSON export

class Observability(BaseModel):
    service_name: str = "ward-locator"
    log_level: str = "INFO"

class Settings(BaseModel):
    detection: Detection = Field(default_factory=Detection)
    data: Data = Field(default_factory=Data)
    observability: Observability = Field(default_factory=Observability)

def _b(name, default=False): return os.getenv(name, str(default)).lower() in ("1","true","yes","on")

def build_settings() -> Settings:
    s = Settings()

    # 탐지
    s.detection.simplify_tolerance_deg = float(os.getenv("SIMPLIFY_TOLERANCE_DEG", s.detection.simplify_tolerance_deg))
    s.detection.nearest_fallback = _b("NEAREST_FALLBACK", s.detection.nearest_fallback)
    s.detection.warn_on_overlap = _b("WARN_ON_OVERLAP", s.detection.warn_on_overlap)

    # 데이터
    s.data.wards_path = os.getenv("WARDS_PATH", s.data.wards_path)

    # 관측성
    s.observability.service_name = os.getenv("SERVICE_NAME", s.observability.service_name)
    s.observability.log_level = os.getenv("LOG_LEVEL", s.observability.log_level)

    return s
