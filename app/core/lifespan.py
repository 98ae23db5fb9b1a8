# app/core/lifespan.py

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.core.config import settings
from app.core.scheduler import create_scheduler
from app.domains.air.client import AirKoreaClient
from app.domains.air.service import AirQualityService
from app.domains.dashboard.service import DashboardService
from app.domains.location.client import GeocodingClient
from app.domains.location.service import LocationService
from app.domains.theme.service import ThemeStore
from app.domains.weather.client import WeatherClient
from app.domains.weather.service import WeatherService

logger = logging.getLogger(__name__)


def build_dashboard(http: httpx.AsyncClient) -> DashboardService:
    """외부 API 클라이언트 -> 서비스 -> 대시보드 조립"""
    location_service = LocationService(GeocodingClient(http))
    weather_service = WeatherService(
        WeatherClient(http),
        AirQualityService(AirKoreaClient(http)),
    )
    return DashboardService(location_service, weather_service)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # [Startup]
    logger.info("🚀 [System] 서버 시작: HTTP 클라이언트 및 대시보드 준비")

    http = httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT_SECONDS)
    dashboard = build_dashboard(http)
    app.state.dashboard = dashboard
    app.state.theme_store = ThemeStore()

    scheduler = create_scheduler(dashboard)
    scheduler.start()

    # 첫 화면 데이터 (기본 위치: 서울) - 실패해도 서버는 뜬다
    view = await dashboard.refresh()
    if view.notice:
        logger.warning(f"⚠️ [Init] 초기 날씨 로딩 실패: {view.notice}")
    else:
        logger.info(f"✅ [Init] 초기 날씨 로딩 완료: {view.location.city_label}")

    yield

    # [Shutdown]
    logger.info("🛑 서버 종료: 스케줄러 정지 및 HTTP 클라이언트 종료")
    scheduler.shutdown()
    await http.aclose()
