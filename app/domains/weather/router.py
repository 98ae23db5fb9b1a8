# app/domains/weather/router.py

from fastapi import APIRouter, Query

from app.domains.location.schemas import GridCell
from app.utils.location import map_to_grid

router = APIRouter()


@router.get("/grid", response_model=GridCell)
async def get_grid(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
):
    """위경도 -> 기상청 격자 좌표 (지도 디버깅용)"""
    return map_to_grid(lat, lng)
