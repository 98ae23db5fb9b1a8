# app/domains/dashboard/service.py

import asyncio
import logging
from typing import Optional

from app.core.exceptions import FetchError, LocationError
from app.domains.dashboard.schemas import DashboardView
from app.domains.location.schemas import Coordinate, LocationInfo, LocationResponse
from app.domains.location.service import LocationService
from app.domains.weather.schemas import WeatherSnapshot
from app.domains.weather.service import WeatherService
from app.utils.location import DEFAULT_LOCATION
from app.utils.time_utils import format_update_time, get_now_kst

logger = logging.getLogger(__name__)


class DashboardService:
    """
    대시보드 화면 상태(현재 위치 + 최신 날씨 스냅샷)를 들고 있는 객체

    - 위치 변경은 지오코딩이 성공했을 때만 반영 (실패 시 이전 위치 유지)
    - 새로고침은 세대(generation) 번호를 매겨서 가장 마지막에 시작한 결과만 반영
      (연속 클릭 시 늦게 도착한 이전 응답이 최신 상태를 덮어쓰지 않도록)
    """

    def __init__(self, location_service: LocationService, weather_service: WeatherService, clock=get_now_kst):
        self.location_service = location_service
        self.weather_service = weather_service
        self.clock = clock

        self._location: LocationInfo = DEFAULT_LOCATION
        self._snapshot: Optional[WeatherSnapshot] = None
        self._last_update: Optional[str] = None

        self._location_seq = 0
        self._generation = 0
        self._inflight: Optional[asyncio.Task] = None

    @property
    def location(self) -> LocationInfo:
        return self._location

    @property
    def snapshot(self) -> Optional[WeatherSnapshot]:
        return self._snapshot

    def view(self, notice: str = None) -> DashboardView:
        return DashboardView(
            location=LocationResponse.from_info(self._location),
            snapshot=self._snapshot,
            last_update=self._last_update,
            notice=notice,
        )

    async def select_coordinate(self, coord: Coordinate) -> DashboardView:
        """지도 클릭"""
        self._location_seq += 1
        seq = self._location_seq
        try:
            info = await self.location_service.resolve_from_coordinate(coord)
        except LocationError as e:
            logger.warning(f"⚠️ 위치 변경 거부 ({coord.lat}, {coord.lng}): {e.message}")
            return self.view(notice=e.message)
        return await self._change_location(info, seq)

    async def search(self, query: str) -> DashboardView:
        """도시 검색"""
        query = (query or "").strip()
        if not query:
            return self.view()

        self._location_seq += 1
        seq = self._location_seq
        try:
            info = await self.location_service.resolve_from_query(query)
        except LocationError as e:
            logger.warning(f"⚠️ 검색 실패 '{query}': {e.message}")
            return self.view(notice=e.message)
        return await self._change_location(info, seq)

    async def _change_location(self, info: LocationInfo, seq: int) -> DashboardView:
        if seq != self._location_seq:
            # 지오코딩 도중 더 최근 위치 요청이 들어옴
            logger.info(f"ℹ️ 이전 위치 요청 결과 무시: {info.city_label}")
            return self.view()
        self._location = info
        return await self.refresh()

    async def refresh(self) -> DashboardView:
        """현재 위치 기준 날씨/대기질 새로고침"""
        self._generation += 1
        generation = self._generation

        # 진행 중인 이전 새로고침은 취소
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()

        location = self._location
        task = asyncio.create_task(
            self.weather_service.refresh(location.grid, location.city_label, now=self.clock())
        )
        self._inflight = task

        try:
            snapshot = await task
        except asyncio.CancelledError:
            if task.cancelled() and generation != self._generation:
                return self.view()
            raise
        except FetchError as e:
            logger.error(
                f"❌ 날씨 새로고침 실패 ({location.city_label}): {e.message}",
                exc_info=True,
                extra={"source": e.source},
            )
            if generation != self._generation:
                return self.view()
            return self.view(notice=FetchError.message)
        finally:
            if self._inflight is task:
                self._inflight = None

        if generation != self._generation:
            logger.info(f"ℹ️ 오래된 새로고침 결과 폐기 (gen={generation}, 최신={self._generation})")
            return self.view()

        self._snapshot = snapshot
        self._last_update = format_update_time(self.clock())
        return self.view()
