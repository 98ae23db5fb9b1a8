# app/domains/weather/client.py

import logging
from urllib.parse import unquote

import httpx

from app.core.config import settings
from app.core.exceptions import FetchError
from app.domains.location.schemas import GridCell
from app.utils.payload import dig, is_record_list

logger = logging.getLogger(__name__)

# 기상청 결과코드: 00 정상, 03 데이터 없음
RESULT_OK = "00"
RESULT_NO_DATA = "03"


class WeatherClient:
    """기상청 단기예보 조회서비스 (초단기실황 / 초단기예보 / 단기예보)"""

    def __init__(self, http: httpx.AsyncClient, api_key: str = None, base_url: str = None):
        self.http = http
        # .env에서 가져온 키가 인코딩된 상태라면 디코딩해서 사용해야 httpx에서 안전함
        self.api_key = unquote(api_key if api_key is not None else settings.DATA_API_KEY)
        self.base_url = (base_url or settings.KMA_API_BASE_URL).rstrip("/")

    async def fetch_ultra_short_now(self, grid: GridCell, base_date: str, base_time: str) -> list:
        """초단기실황 (현재 기온/습도/강수형태)"""
        return await self._fetch("getUltraSrtNcst", grid, base_date, base_time, rows=100)

    async def fetch_ultra_short_forecast(self, grid: GridCell, base_date: str, base_time: str) -> list:
        """초단기예보 (앞으로 6시간)"""
        return await self._fetch("getUltraSrtFcst", grid, base_date, base_time, rows=100)

    async def fetch_village_forecast(self, grid: GridCell, base_date: str, base_time: str = "0200") -> list:
        """단기예보 (오늘~모레 이후, 02시 발표분에 최고/최저 기온 포함)"""
        return await self._fetch("getVilageFcst", grid, base_date, base_time, rows=1000)

    async def _fetch(self, endpoint: str, grid: GridCell, base_date: str, base_time: str, rows: int) -> list:
        params = {
            "serviceKey": self.api_key,
            "pageNo": "1",
            "numOfRows": str(rows),
            "dataType": "JSON",
            "base_date": base_date,
            "base_time": base_time,
            "nx": str(grid.nx),
            "ny": str(grid.ny),
        }

        logger.info(f"📡 기상청 API 요청: {endpoint} {base_date} {base_time} (nx={grid.nx}, ny={grid.ny})")

        try:
            response = await self.http.get(f"{self.base_url}/{endpoint}", params=params)
            response.raise_for_status()
            # 키 오류 등은 dataType=JSON이어도 XML로 내려오므로 여기서 ValueError
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise FetchError(f"기상청 {endpoint} 호출 실패: {e}", source=endpoint) from e

        if not isinstance(dig(data, "response"), dict):
            raise FetchError(f"기상청 {endpoint} 응답 형식 이상: response", source=endpoint)

        result_code = dig(data, "response", "header", "resultCode") or RESULT_OK
        if result_code == RESULT_NO_DATA:
            logger.warning(f"⚠️ 기상청 {endpoint} 데이터 없음 ({base_date} {base_time})")
            return []
        if result_code != RESULT_OK:
            result_msg = dig(data, "response", "header", "resultMsg")
            raise FetchError(f"기상청 {endpoint} 결과 에러: {result_msg}", source=endpoint)

        # 데이터가 없으면 items가 ""로 내려오기도 함
        items = dig(data, "response", "body", "items", "item") or []
        if not is_record_list(items):
            raise FetchError(f"기상청 {endpoint} 응답 형식 이상: item", source=endpoint)
        return items
