# app/domains/location/service.py

import logging

from pydantic import ValidationError

from app.core.exceptions import GeocodingError, NotFoundError, OutOfBoundsError
from app.domains.location.client import GeocodingClient
from app.domains.location.schemas import Coordinate, LocationInfo
from app.utils.location import SUPPORTED_COUNTRY, map_to_grid
from app.utils.payload import dig

logger = logging.getLogger(__name__)


def find_component(components: list, component_type: str):
    """address_components 중 해당 type을 가진 첫 항목의 long_name (없으면 None)"""
    for component in components:
        if isinstance(component, dict) and component_type in (component.get("types") or []):
            return component.get("long_name")
    return None


class LocationService:
    def __init__(self, client: GeocodingClient):
        self.client = client

    async def resolve_from_coordinate(self, coord: Coordinate) -> LocationInfo:
        """지도 클릭 좌표 -> 위치 정보 (역지오코딩)"""
        results = await self.client.reverse(coord.lat, coord.lng)
        if not results:
            logger.warning(f"⚠️ 역지오코딩 결과 없음: ({coord.lat}, {coord.lng})")
            raise NotFoundError()
        return self._build_location(results[0], coord)

    async def resolve_from_query(self, text: str) -> LocationInfo:
        """검색어 -> 위치 정보 (정방향 지오코딩)"""
        results = await self.client.search(text)
        if not results:
            logger.warning(f"⚠️ 검색 결과 없음: {text}")
            raise NotFoundError()

        result = results[0]
        lat = dig(result, "geometry", "location", "lat")
        lng = dig(result, "geometry", "location", "lng")
        if lat is None or lng is None:
            raise NotFoundError()
        try:
            coord = Coordinate(lat=lat, lng=lng)
        except ValidationError as e:
            logger.error(f"❌ 지오코딩 좌표 형식 이상: {lat}, {lng}")
            raise GeocodingError() from e
        return self._build_location(result, coord)

    def _build_location(self, result: dict, coord: Coordinate) -> LocationInfo:
        components = result.get("address_components")
        if not isinstance(components, list):
            components = []

        # 1. 국가 검증 (대한민국 외 지역은 거부)
        country = find_component(components, "country")
        if country != SUPPORTED_COUNTRY:
            logger.warning(f"⚠️ 지원하지 않는 국가 선택: {country} ({coord.lat}, {coord.lng})")
            raise OutOfBoundsError(country)

        # 2. 시/도, 시/군/구, 동/읍/면 (각각 없어도 됨)
        province = find_component(components, "administrative_area_level_1")
        city = find_component(components, "locality")
        dong = find_component(components, "sublocality_level_1")

        try:
            info = LocationInfo(
                coordinate=coord,
                grid=map_to_grid(coord.lat, coord.lng),
                country_name=country,
                province_name=province,
                city_name=city,
                sub_locality_name=dong,
            )
        except ValidationError as e:
            logger.error(f"❌ 주소 구성요소 형식 이상: {e}")
            raise GeocodingError() from e
        logger.info(f"📍 위치 변환 성공: {info.city_label} ({coord.lat}, {coord.lng}) -> ({info.grid.nx}, {info.grid.ny})")
        return info
