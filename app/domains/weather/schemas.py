# app/domains/weather/schemas.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, computed_field

from app.domains.air.schemas import AirQualityReading
from app.domains.location.schemas import GridCell
from app.domains.weather.utils import get_weekday, round_string_to_int


class CurrentObservation(BaseModel):
    """초단기실황 (현재 날씨)"""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    temp: Optional[str] = None         # T1H 기온
    humidity: Optional[str] = None     # REH 습도
    precip_type: Optional[str] = None  # PTY 강수형태 ("sunny", "rainy" ... 없는 코드는 "-")

    @computed_field
    @property
    def temp_display(self) -> str:
        return round_string_to_int(self.temp)


class HourlySlot(BaseModel):
    """초단기예보 한 시간 칸"""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    time: str                     # "1400"
    temp: Optional[str] = None
    sky: Optional[str] = None     # 없는 코드면 None (아이콘 없음)

    @computed_field
    @property
    def temp_display(self) -> str:
        return round_string_to_int(self.temp)


class DailySlot(BaseModel):
    """단기예보 하루 칸"""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    date: str                         # "20261017"
    max_temp: Optional[str] = None    # TMX
    min_temp: Optional[str] = None    # TMN
    pop: Optional[str] = None         # POP 강수확률(%)
    sky: Optional[str] = None

    @computed_field
    @property
    def weekday(self) -> str:
        return get_weekday(self.date)

    @computed_field
    @property
    def max_display(self) -> str:
        return round_string_to_int(self.max_temp)

    @computed_field
    @property
    def min_display(self) -> str:
        return round_string_to_int(self.min_temp)


class WeatherSnapshot(BaseModel):
    """새로고침 1회 결과 (4개 API 합본)"""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    grid: GridCell       # 어느 격자 기준으로 받아온 데이터인지
    city_label: str
    current: CurrentObservation
    hourly: List[HourlySlot]
    daily: List[DailySlot]
    air_quality: Optional[AirQualityReading] = None  # None = 해당 지역 측정값 없음
    fetched_at: datetime
