# app/domains/location/client.py

import logging

import httpx

from app.core.config import settings
from app.core.exceptions import GeocodingError
from app.utils.payload import is_record_list

logger = logging.getLogger(__name__)


class GeocodingClient:
    """구글 Geocoding API (정방향: 주소 -> 좌표 / 역방향: 좌표 -> 주소)"""

    def __init__(self, http: httpx.AsyncClient, api_key: str = None, base_url: str = None):
        self.http = http
        self.api_key = api_key if api_key is not None else settings.GOOGLE_API_KEY
        self.base_url = base_url or settings.GOOGLE_GEOCODE_URL

    async def reverse(self, lat: float, lng: float) -> list:
        return await self._request({"latlng": f"{lat},{lng}"})

    async def search(self, address: str) -> list:
        return await self._request({"address": address})

    async def _request(self, query: dict) -> list:
        params = {
            "key": self.api_key,
            "language": settings.GEOCODE_LANGUAGE,
            **query,
        }
        try:
            response = await self.http.get(self.base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"❌ 지오코딩 호출 실패 ({query}): {e}")
            raise GeocodingError() from e

        if not isinstance(data, dict):
            logger.error(f"❌ 지오코딩 응답 형식 이상: {type(data).__name__}")
            raise GeocodingError()

        # ZERO_RESULTS는 정상 응답 (결과 없음)
        status = data.get("status", "OK")
        if status not in ("OK", "ZERO_RESULTS"):
            logger.error(f"❌ 지오코딩 API 결과 에러: {status} {data.get('error_message', '')}")
            raise GeocodingError()

        results = data.get("results") or []
        if not is_record_list(results):
            logger.error("❌ 지오코딩 응답 형식 이상: results")
            raise GeocodingError()
        return results
