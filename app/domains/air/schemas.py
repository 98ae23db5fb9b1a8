# app/domains/air/schemas.py

from pydantic import BaseModel, ConfigDict, computed_field
from typing import Optional

from app.domains.air.utils import get_grade_info


class GradeInfo(BaseModel):
    text: str    # "좋음", "보통" ...
    color: str   # 화면 표시용 색상


class AirQualityReading(BaseModel):
    """에어코리아 측정소 1곳의 실시간 측정값"""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    station: str
    pm10_value: Optional[str] = None
    pm10_grade: Optional[str] = None   # "1"~"4", 측정 장애 시 None
    pm25_value: Optional[str] = None
    pm25_grade: Optional[str] = None
    data_time: Optional[str] = None    # "2026-10-16 14:00"

    @computed_field
    @property
    def pm10_grade_info(self) -> GradeInfo:
        return GradeInfo(**get_grade_info(self.pm10_grade))

    @computed_field
    @property
    def pm25_grade_info(self) -> GradeInfo:
        return GradeInfo(**get_grade_info(self.pm25_grade))

    @classmethod
    def from_item(cls, item: dict) -> "AirQualityReading":
        return cls(
            station=item.get("stationName") or "",
            pm10_value=item.get("pm10Value"),
            pm10_grade=item.get("pm10Grade"),
            pm25_value=item.get("pm25Value"),
            pm25_grade=item.get("pm25Grade"),
            data_time=item.get("dataTime"),
        )
