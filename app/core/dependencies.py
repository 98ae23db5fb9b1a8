# app/core/dependencies.py

from fastapi import Request

from app.domains.dashboard.service import DashboardService
from app.domains.theme.service import ThemeStore


# lifespan에서 app.state에 올려둔 객체를 라우터에 주입
def get_dashboard(request: Request) -> DashboardService:
    return request.app.state.dashboard


def get_theme_store(request: Request) -> ThemeStore:
    return request.app.state.theme_store
