# app/domains/location/router.py

from fastapi import APIRouter, Depends

from app.core.dependencies import get_dashboard
from app.domains.dashboard.schemas import DashboardView
from app.domains.dashboard.service import DashboardService
from app.domains.location.schemas import Coordinate, MapConfig, SearchRequest
from app.utils.location import DEFAULT_COORDINATE, DEFAULT_ZOOM, KOREA_BOUNDS, MIN_ZOOM

router = APIRouter()


# 1. 지도 클릭
@router.post("/click", response_model=DashboardView)
async def select_on_map(
    coord: Coordinate,
    dashboard: DashboardService = Depends(get_dashboard)
):
    """
    클릭한 좌표로 위치 변경 후 날씨 새로고침
    대한민국 밖이면 위치는 그대로 두고 notice로 안내
    """
    return await dashboard.select_coordinate(coord)


# 2. 도시 검색
@router.post("/search", response_model=DashboardView)
async def search_city(
    body: SearchRequest,
    dashboard: DashboardService = Depends(get_dashboard)
):
    return await dashboard.search(body.query)


# 3. 지도 위젯 초기 설정
@router.get("/map-config", response_model=MapConfig)
async def get_map_config():
    return MapConfig(
        center=DEFAULT_COORDINATE,
        zoom=DEFAULT_ZOOM,
        min_zoom=MIN_ZOOM,
        bounds=KOREA_BOUNDS,
        strict_bounds=True,
    )
