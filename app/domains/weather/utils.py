# app/domains/weather/utils.py

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from datetime import datetime

# 기상청 하늘상태(SKY) 코드
SKY_MAP = {
    1: "sunny",
    3: "mostly_cloudy",
    4: "cloudy",
}

# 기상청 강수형태(PTY) 코드
PRECIP_MAP = {
    0: "sunny",
    1: "rainy",
    2: "rainy&snowy",
    3: "snowy",
    5: "rainy",
    6: "rainy&snowy",
    7: "snowy",
}

UNKNOWN_PRECIP = "-"
PLACEHOLDER = "--"

WEEKDAYS_KO = ["월", "화", "수", "목", "금", "토", "일"]


def _lookup(table: dict, code):
    try:
        return table.get(int(code))
    except (TypeError, ValueError):
        return None


def sky_label(code):
    return _lookup(SKY_MAP, code)


def precip_label(code) -> str:
    label = _lookup(PRECIP_MAP, code)
    return label if label is not None else UNKNOWN_PRECIP


def round_string_to_int(value) -> str:
    """
    문자열 숫자를 정수 문자열로 (0에서 먼 쪽으로 반올림)
    "23.6" -> "24", "23.4" -> "23", "-0.5" -> "-1", "-0.4" -> "0"
    숫자가 아니면 "--"
    """
    if value is None:
        return PLACEHOLDER
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return PLACEHOLDER
    if not number.is_finite():
        return PLACEHOLDER
    return str(int(number.quantize(Decimal("1"), rounding=ROUND_HALF_UP)))


def get_weekday(yyyymmdd: str) -> str:
    """예) "20261017" -> "토" """
    try:
        return WEEKDAYS_KO[datetime.strptime(yyyymmdd, "%Y%m%d").weekday()]
    except (TypeError, ValueError):
        return ""
