# app/domains/weather/reducer.py

from app.domains.weather.schemas import CurrentObservation, DailySlot, HourlySlot
from app.domains.weather.utils import precip_label, sky_label

HOURLY_CATEGORIES = {"T1H", "SKY"}
DAILY_CATEGORIES = {"TMX", "TMN", "POP", "SKY"}


def reduce_current(items: list) -> CurrentObservation:
    """
    초단기실황 item 목록 -> 현재 날씨
    (T1H: 기온, REH: 습도, PTY: 강수형태)
    """
    current = {}
    for item in items:
        category = item.get("category")
        value = item.get("obsrValue")
        if category == "T1H":
            current["temp"] = value
        elif category == "REH":
            current["humidity"] = value
        elif category == "PTY":
            current["precip_type"] = precip_label(value)
    return CurrentObservation(**current)


def hourly_keys(window_start: int, window_size: int = 6) -> list:
    """23시 시작이면 ["2300", "0000", "0100", ...]"""
    return [f"{(window_start + i) % 24:02d}00" for i in range(window_size)]


def reduce_hourly(items: list, window_start: int, window_size: int = 6) -> list:
    """
    초단기예보 item 목록을 fcstTime 기준으로 묶은 뒤,
    window_start 시부터 window_size 시간만 요청 순서대로 꺼낸다.
    아직 발표되지 않은 시간은 빠진다.
    """
    grouped = {}
    for item in items:
        key = item.get("fcstTime")
        # 모르는 카테고리(RN1, LGT 등)는 무시
        if key is None or item.get("category") not in HOURLY_CATEGORIES:
            continue
        slot = grouped.setdefault(key, {"time": key})

        category = item.get("category")
        if category == "T1H":
            slot["temp"] = item.get("fcstValue")
        elif category == "SKY":
            slot["sky"] = sky_label(item.get("fcstValue"))

    return [
        HourlySlot(**grouped[key])
        for key in hourly_keys(window_start, window_size)
        if key in grouped
    ]


def reduce_daily(items: list, keep: tuple = (1, 3)) -> list:
    """
    단기예보 item 목록을 fcstDate 기준으로 묶는다.
    첫 날(오늘)은 버리고 keep 범위(기본 1~3번째)만 남긴다.
    """
    grouped = {}
    for item in items:
        key = item.get("fcstDate")
        if key is None or item.get("category") not in DAILY_CATEGORIES:
            continue
        slot = grouped.setdefault(key, {"date": key})

        category = item.get("category")
        value = item.get("fcstValue")
        if category == "TMX":
            slot["max_temp"] = value
        elif category == "TMN":
            slot["min_temp"] = value
        elif category == "POP":
            slot["pop"] = value
        elif category == "SKY":
            slot["sky"] = sky_label(value)

    start, end = keep
    return [DailySlot(**slot) for slot in list(grouped.values())[start:end + 1]]
