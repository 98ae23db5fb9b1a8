# app/domains/location/schemas.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)     # 위도
    lng: float = Field(..., ge=-180, le=180)   # 경도


class GridCell(BaseModel):
    """기상청 동네예보 격자 좌표"""
    model_config = ConfigDict(frozen=True)

    nx: int
    ny: int


class LocationInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    coordinate: Coordinate
    grid: GridCell
    country_name: str
    province_name: Optional[str] = None      # 시/도 (administrative_area_level_1)
    city_name: Optional[str] = None          # 시/군/구 (locality)
    sub_locality_name: Optional[str] = None  # 동/읍/면 (sublocality_level_1)

    @property
    def city_label(self) -> str:
        """
        화면 표시 + 대기질 조회에 공통으로 쓰는 대표 이름
        예) "전주시, 전라북도" / 시가 없으면 "서울특별시" / 시/도가 없으면 "전주시"
        """
        if self.city_name and self.province_name:
            return f"{self.city_name}, {self.province_name}"
        return self.city_name or self.province_name or ""


#
#=============입력================
#
class SearchRequest(BaseModel):
    query: str


#
#=============출력================
#
class LocationResponse(BaseModel):
    coordinate: Coordinate
    grid: GridCell
    country_name: str
    city_label: str
    sub_locality_name: Optional[str] = None

    @classmethod
    def from_info(cls, info: LocationInfo) -> "LocationResponse":
        return cls(
            coordinate=info.coordinate,
            grid=info.grid,
            country_name=info.country_name,
            city_label=info.city_label,
            sub_locality_name=info.sub_locality_name,
        )


class MapBounds(BaseModel):
    north: float
    south: float
    west: float
    east: float


class MapConfig(BaseModel):
    center: Coordinate
    zoom: int
    min_zoom: int
    bounds: MapBounds
    strict_bounds: bool = False
