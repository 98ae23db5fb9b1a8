# app/domains/dashboard/schemas.py

from pydantic import BaseModel, ConfigDict
from typing import Optional

from app.domains.location.schemas import LocationResponse
from app.domains.weather.schemas import WeatherSnapshot


class DashboardView(BaseModel):
    """화면에 넘기는 전체 상태 (새로고침/위치 변경마다 새로 만든다)"""
    model_config = ConfigDict(frozen=True)

    location: LocationResponse
    snapshot: Optional[WeatherSnapshot] = None  # 최초 로딩 전이거나 계속 실패한 경우 None
    last_update: Optional[str] = None           # "2026/10/16 14:05"
    notice: Optional[str] = None                # 사용자 안내 문구 (alert 용)
