# app/utils/location.py

import math

from app.domains.location.schemas import Coordinate, GridCell, LocationInfo, MapBounds

SUPPORTED_COUNTRY = "대한민국"

# 기본 위치 (서울특별시청)
DEFAULT_COORDINATE = Coordinate(lat=37.5665, lng=126.978)
DEFAULT_LOCATION = LocationInfo(
    coordinate=DEFAULT_COORDINATE,
    grid=GridCell(nx=60, ny=127),
    country_name=SUPPORTED_COUNTRY,
    province_name="서울특별시",
)

# 지도 선택 가능 범위 (한반도 남측)
KOREA_BOUNDS = MapBounds(north=38.63, south=33.0, west=124.6, east=131.87)
DEFAULT_ZOOM = 11
MIN_ZOOM = 6


def map_to_grid(lat: float, lon: float) -> GridCell:
    """
    위도/경도 -> 기상청 격자(NX, NY) 변환 (Lambert Conformal Conic)
    """
    RE = 6371.00877  # 지구 반경(km)
    GRID = 5.0       # 격자 간격(km)
    SLAT1 = 30.0     # 표준위도1
    SLAT2 = 60.0     # 표준위도2
    OLON = 126.0     # 기준점 경도
    OLAT = 38.0      # 기준점 위도
    XO = 43          # 기준점 X좌표(GRID)
    YO = 136         # 기준점 Y좌표(GRID)

    DEGRAD = math.pi / 180.0

    re = RE / GRID
    slat1 = SLAT1 * DEGRAD
    slat2 = SLAT2 * DEGRAD
    olon = OLON * DEGRAD
    olat = OLAT * DEGRAD

    sn = math.tan(math.pi * 0.25 + slat2 * 0.5) / math.tan(math.pi * 0.25 + slat1 * 0.5)
    sn = math.log(math.cos(slat1) / math.cos(slat2)) / math.log(sn)
    sf = math.tan(math.pi * 0.25 + slat1 * 0.5)
    sf = pow(sf, sn) * math.cos(slat1) / sn
    ro = math.tan(math.pi * 0.25 + olat * 0.5)
    ro = re * sf / pow(ro, sn)

    ra = math.tan(math.pi * 0.25 + lat * DEGRAD * 0.5)
    ra = re * sf / pow(ra, sn)

    theta = lon * DEGRAD - olon
    if theta > math.pi:
        theta -= 2.0 * math.pi
    if theta < -math.pi:
        theta += 2.0 * math.pi
    theta *= sn

    nx = int(math.floor(ra * math.sin(theta) + XO + 0.5))
    ny = int(math.floor(ro - ra * math.cos(theta) + YO + 0.5))

    return GridCell(nx=nx, ny=ny)

