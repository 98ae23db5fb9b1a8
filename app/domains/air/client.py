# app/domains/air/client.py

import logging
from urllib.parse import unquote

import httpx

from app.core.config import settings
from app.core.exceptions import FetchError
from app.utils.payload import dig, is_record_list

logger = logging.getLogger(__name__)


class AirKoreaClient:
    """에어코리아 시도별 실시간 측정정보 조회"""

    def __init__(self, http: httpx.AsyncClient, api_key: str = None, base_url: str = None):
        self.http = http
        # 공공데이터포털 키는 인코딩된 상태로 발급되므로 디코딩해서 넘겨야 이중 인코딩이 안 됨
        self.api_key = unquote(api_key if api_key is not None else settings.AIR_KOREA_API_KEY)
        self.base_url = base_url or settings.AIR_KOREA_API_URL

    async def fetch_sido(self, sido_name: str) -> list:
        params = {
            "serviceKey": self.api_key,
            "returnType": "json",
            "numOfRows": "100",
            "pageNo": "1",
            "sidoName": sido_name,
            "ver": "1.5",
        }

        logger.info(f"📡 에어코리아 API 요청: sidoName={sido_name}")

        try:
            response = await self.http.get(self.base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise FetchError(f"에어코리아 호출 실패: {e}", source="air") from e

        if not isinstance(dig(data, "response"), dict):
            raise FetchError("에어코리아 응답 형식 이상: response", source="air")

        result_code = dig(data, "response", "header", "resultCode") or "00"
        if result_code == "03":  # NODATA_ERROR
            return []
        if result_code != "00":
            result_msg = dig(data, "response", "header", "resultMsg")
            raise FetchError(f"에어코리아 결과 에러: {result_msg}", source="air")

        items = dig(data, "response", "body", "items") or []
        if not is_record_list(items):
            raise FetchError("에어코리아 응답 형식 이상: items", source="air")
        return items
