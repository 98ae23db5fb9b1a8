# app/domains/weather/service.py

import asyncio
import logging
from datetime import datetime

from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import FetchError
from app.domains.air.service import AirQualityService
from app.domains.location.schemas import GridCell
from app.domains.weather.client import WeatherClient
from app.domains.weather.reducer import reduce_current, reduce_daily, reduce_hourly
from app.domains.weather.schemas import WeatherSnapshot
from app.utils.time_utils import get_base_times, get_now_kst

logger = logging.getLogger(__name__)


class WeatherService:
    def __init__(self, weather_client: WeatherClient, air_service: AirQualityService, timeout: float = None):
        self.weather_client = weather_client
        self.air_service = air_service
        self.timeout = timeout if timeout is not None else settings.REFRESH_TIMEOUT_SECONDS

    async def refresh(self, grid: GridCell, city_label: str, now: datetime = None) -> WeatherSnapshot:
        """
        4개 API(초단기실황, 초단기예보, 단기예보, 대기질)를 동시에 호출해서 하나의 스냅샷으로 합친다.
        하나라도 실패하면 FetchError (부분 결과는 버림)
        """
        now = now or get_now_kst()
        base = get_base_times(now)

        try:
            ncst_items, fcst_items, vila_items, air_reading = await asyncio.wait_for(
                asyncio.gather(
                    self.weather_client.fetch_ultra_short_now(grid, base["base_date"], base["base_time"]),
                    self.weather_client.fetch_ultra_short_forecast(grid, base["base_date"], base["base_time"]),
                    self.weather_client.fetch_village_forecast(grid, base["village_base_date"], base["village_base_time"]),
                    self.air_service.get_reading(city_label),
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise FetchError(f"새로고침 시간 초과 ({self.timeout}s)", source="timeout") from e

        try:
            snapshot = WeatherSnapshot(
                grid=grid,
                city_label=city_label,
                current=reduce_current(ncst_items),
                hourly=reduce_hourly(fcst_items, window_start=now.hour),
                daily=reduce_daily(vila_items),
                air_quality=air_reading,
                fetched_at=now,
            )
        except ValidationError as e:
            raise FetchError(f"응답 형식 이상: {e}", source="reduce") from e
        logger.info(
            f"✅ 날씨 갱신 완료: {city_label} (nx={grid.nx}, ny={grid.ny}) "
            f"시간별 {len(snapshot.hourly)}개, 일별 {len(snapshot.daily)}개, "
            f"대기질 {snapshot.air_quality.station if snapshot.air_quality else '없음'}"
        )
        return snapshot
