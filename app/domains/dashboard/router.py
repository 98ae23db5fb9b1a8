# app/domains/dashboard/router.py

from fastapi import APIRouter, Depends

from app.core.dependencies import get_dashboard
from app.domains.dashboard.schemas import DashboardView
from app.domains.dashboard.service import DashboardService

router = APIRouter()


@router.get("", response_model=DashboardView)
async def get_dashboard_view(dashboard: DashboardService = Depends(get_dashboard)):
    """현재 위치 + 마지막으로 받아온 날씨/대기질"""
    return dashboard.view()


@router.post("/refresh", response_model=DashboardView)
async def refresh_dashboard(dashboard: DashboardService = Depends(get_dashboard)):
    """
    [새로고침 버튼]
    실패하면 이전 데이터를 그대로 두고 notice에 안내 문구를 담아 돌려준다.
    """
    return await dashboard.refresh()
