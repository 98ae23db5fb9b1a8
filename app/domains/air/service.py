# app/domains/air/service.py

import logging
from typing import Optional

from pydantic import ValidationError

from app.core.exceptions import FetchError
from app.domains.air.client import AirKoreaClient
from app.domains.air.schemas import AirQualityReading
from app.domains.air.utils import select_station
from app.utils.region import format_sido_name, split_city_label

logger = logging.getLogger(__name__)


class AirQualityService:
    def __init__(self, client: AirKoreaClient):
        self.client = client

    async def get_reading(self, city_label: str) -> Optional[AirQualityReading]:
        """
        "전주시, 전라북도" -> sidoName "전북" 으로 조회 후 "전주시" 측정소 선택
        측정소가 하나도 없으면 None
        """
        station_name, province = split_city_label(city_label)
        items = await self.client.fetch_sido(format_sido_name(province))

        item = select_station(items, station_name)
        if item is None:
            logger.info(f"ℹ️ 대기질 데이터 없음: {city_label}")
            return None

        if item.get("stationName") != station_name:
            logger.info(f"ℹ️ '{station_name}' 측정소 없음 -> '{item.get('stationName')}' 사용")
        try:
            return AirQualityReading.from_item(item)
        except ValidationError as e:
            raise FetchError(f"에어코리아 응답 형식 이상: {e}", source="air") from e
