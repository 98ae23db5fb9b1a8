# app/domains/air/utils.py

GRADE_INFO = {
    "1": {"text": "좋음", "color": "#32a852"},
    "2": {"text": "보통", "color": "#3282a8"},
    "3": {"text": "나쁨", "color": "#ff8c00"},
    "4": {"text": "매우 나쁨", "color": "#d14023"},
}
UNKNOWN_GRADE = {"text": "알 수 없음", "color": "#808080"}


def get_grade_info(grade) -> dict:
    """에어코리아 등급(1~4) -> 표시 문구/색상, 그 외(None, "-" 등)는 '알 수 없음'"""
    if grade is None:
        return dict(UNKNOWN_GRADE)
    return dict(GRADE_INFO.get(str(grade).strip(), UNKNOWN_GRADE))


def select_station(items: list, station_name: str):
    """
    측정소 선택: 시/군/구 이름과 같은 측정소 우선, 없으면 응답의 첫 번째 측정소
    응답이 비어 있으면 None (데이터 없음)
    """
    if not items:
        return None
    for item in items:
        if item.get("stationName") == station_name:
            return item
    return items[0]
