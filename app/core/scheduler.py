# app/core/scheduler.py

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from app.core.config import settings
from app.domains.dashboard.service import DashboardService

logger = logging.getLogger(__name__)


async def refresh_dashboard_job(dashboard: DashboardService):
    """매시 정각 이후 초단기실황 발표에 맞춰 자동 새로고침"""
    logger.info(f"⏰ [Refresh Job] 자동 새로고침: {dashboard.location.city_label}")
    view = await dashboard.refresh()
    if view.notice:
        logger.warning(f"⚠️ [Refresh Job] {view.notice}")


def create_scheduler(dashboard: DashboardService) -> AsyncIOScheduler:
    scheduler = AsyncIOScheduler(timezone="Asia/Seoul")
    if settings.AUTO_REFRESH_ENABLED:
        scheduler.add_job(
            refresh_dashboard_job, 'cron',
            minute=settings.AUTO_REFRESH_MINUTE,
            args=[dashboard],
            id="refresh_dashboard",
            max_instances=1,
            coalesce=True,
        )
    return scheduler
