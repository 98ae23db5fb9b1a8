# app/utils/time_utils.py

from datetime import datetime, timedelta
import pytz

KST = pytz.timezone('Asia/Seoul')


def get_now_kst():
    return datetime.now(KST)


def format_update_time(dt: datetime) -> str:
    """화면 '마지막 업데이트' 표기: 2026/10/16 14:05"""
    return dt.strftime("%Y/%m/%d %H:%M")


def get_base_times(now: datetime) -> dict:
    """
    기상청 요청 기준시각 계산
    - 초단기실황/초단기예보: 1시간 전 정시 (매시 40분 이후 발표되므로 안전하게 한 시간 전)
    - 단기예보: 같은 날짜의 02시 발표분 (최고/최저 기온이 들어있는 발표)
    """
    base = now - timedelta(hours=1)
    base_date = base.strftime("%Y%m%d")
    return {
        "base_date": base_date,
        "base_time": base.strftime("%H00"),
        "village_base_date": base_date,
        "village_base_time": "0200",
    }
