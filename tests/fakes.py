"""Payload builders and fake collaborators shared by tests."""

import asyncio
from datetime import datetime

from app.core.exceptions import FetchError, NotFoundError, OutOfBoundsError
from app.domains.location.schemas import Coordinate, LocationInfo
from app.domains.weather.schemas import CurrentObservation, WeatherSnapshot
from app.utils.location import map_to_grid
from app.utils.time_utils import KST

JEONJU = Coordinate(lat=35.8242, lng=127.1480)
TOKYO = Coordinate(lat=35.6762, lng=139.6503)


def kst(*args) -> datetime:
    return KST.localize(datetime(*args))


def kma_payload(items: list, result_code: str = "00") -> dict:
    return {
        "response": {
            "header": {"resultCode": result_code, "resultMsg": "NORMAL_SERVICE"},
            "body": {
                "dataType": "JSON",
                "items": {"item": items},
                "totalCount": len(items),
            },
        }
    }


def air_payload(items: list) -> dict:
    return {
        "response": {
            "header": {"resultCode": "00", "resultMsg": "NORMAL_CODE"},
            "body": {"items": items, "totalCount": len(items)},
        }
    }


def component(name: str, *types: str) -> dict:
    return {"long_name": name, "short_name": name, "types": list(types)}


def geocode_result(lat: float, lng: float, components: list) -> dict:
    return {
        "address_components": components,
        "geometry": {"location": {"lat": lat, "lng": lng}},
    }


JEONJU_COMPONENTS = [
    component("효자동", "political", "sublocality", "sublocality_level_1"),
    component("전주시", "locality", "political"),
    component("전라북도", "administrative_area_level_1", "political"),
    component("대한민국", "country", "political"),
]

TOKYO_COMPONENTS = [
    component("신주쿠구", "locality", "political"),
    component("도쿄도", "administrative_area_level_1", "political"),
    component("일본", "country", "political"),
]


class FakeGeocodingClient:
    def __init__(self, reverse_results=None, search_results=None):
        self.reverse_results = reverse_results or []
        self.search_results = search_results or []
        self.calls = []

    async def reverse(self, lat, lng):
        self.calls.append(("reverse", lat, lng))
        return self.reverse_results

    async def search(self, address):
        self.calls.append(("search", address))
        return self.search_results


def make_location(coord: Coordinate, province: str, city: str = None) -> LocationInfo:
    return LocationInfo(
        coordinate=coord,
        grid=map_to_grid(coord.lat, coord.lng),
        country_name="대한민국",
        province_name=province,
        city_name=city,
    )


class FakeLocationService:
    """좌표/검색어 -> LocationInfo 또는 예외"""

    def __init__(self, by_coordinate=None, by_query=None):
        self.by_coordinate = by_coordinate or {}
        self.by_query = by_query or {}

    async def resolve_from_coordinate(self, coord):
        result = self.by_coordinate.get((coord.lat, coord.lng), OutOfBoundsError("일본"))
        if isinstance(result, Exception):
            raise result
        return result

    async def resolve_from_query(self, text):
        result = self.by_query.get(text, NotFoundError())
        if isinstance(result, Exception):
            raise result
        return result


def make_snapshot(grid, city_label, fetched_at=None, temp="20.0") -> WeatherSnapshot:
    return WeatherSnapshot(
        grid=grid,
        city_label=city_label,
        current=CurrentObservation(temp=temp, humidity="50", precip_type="sunny"),
        hourly=[],
        daily=[],
        air_quality=None,
        fetched_at=fetched_at or kst(2026, 10, 16, 14, 5),
    )


class FakeWeatherService:
    """호출 기록 + 실패 주입 + (선택) 게이트로 완료 시점 제어"""

    def __init__(self, fail: bool = False, gated: bool = False):
        self.fail = fail
        self.calls = []
        self.cancelled = 0
        self.gate = asyncio.Event() if gated else None

    async def refresh(self, grid, city_label, now=None):
        self.calls.append((grid, city_label))
        call_no = len(self.calls)
        if self.gate is not None:
            try:
                await self.gate.wait()
            except asyncio.CancelledError:
                self.cancelled += 1
                raise
        if self.fail:
            raise FetchError("boom", source="test")
        return make_snapshot(grid, f"{city_label}#{call_no}", fetched_at=now)
