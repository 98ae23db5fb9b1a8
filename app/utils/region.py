# app/utils/region.py

DEFAULT_SIDO = "서울"

# 에어코리아 sidoName 파라미터는 줄임말만 받음
SHORT_SIDO_NAMES = {
    "서울특별시": "서울",
    "부산광역시": "부산",
    "대구광역시": "대구",
    "인천광역시": "인천",
    "광주광역시": "광주",
    "대전광역시": "대전",
    "울산광역시": "울산",
    "세종특별자치시": "세종",
    "경기도": "경기",
    "강원도": "강원",
    "강원특별자치도": "강원",
    "충청북도": "충북",
    "충청남도": "충남",
    "전라북도": "전북",
    "전북특별자치도": "전북",
    "전라남도": "전남",
    "경상북도": "경북",
    "경상남도": "경남",
    "제주특별자치도": "제주",
}


def format_sido_name(sido: str = None) -> str:
    """
    '서울특별시' -> '서울', '전라북도' -> '전북'
    표에 없는 이름은 그대로 돌려준다 (행정구역 명칭 변경 대비)
    """
    if not sido or not sido.strip():
        return DEFAULT_SIDO
    sido = sido.strip()
    return SHORT_SIDO_NAMES.get(sido, sido)


def split_city_label(city_label: str) -> tuple:
    """
    "전주시, 전라북도" -> ("전주시", "전라북도")
    "서울특별시"       -> ("서울특별시", "서울특별시")
    """
    parts = [p.strip() for p in (city_label or "").split(", ")]
    locality = parts[0]
    province = parts[1] if len(parts) > 1 and parts[1] else locality
    return locality, province
