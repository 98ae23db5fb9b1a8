# app/core/config.py

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "날씨 대시보드"

    # 공공데이터포털 기상청 단기예보 API 키 (인코딩된 키도 그대로 넣으면 됨)
    DATA_API_KEY: str = ""
    KMA_API_BASE_URL: str = "https://apis.data.go.kr/1360000/VilageFcstInfoService_2.0"

    # 에어코리아 대기오염정보 API 키
    AIR_KOREA_API_KEY: str = ""
    AIR_KOREA_API_URL: str = "https://apis.data.go.kr/B552584/ArpltnInforInqireSvc/getCtprvnRltmMesureDnsty"

    # 구글 지오코딩
    GOOGLE_API_KEY: str = ""
    GOOGLE_GEOCODE_URL: str = "https://maps.googleapis.com/maps/api/geocode/json"
    GEOCODE_LANGUAGE: str = "ko"

    # 개별 요청 타임아웃 / 새로고침 1회 전체 타임아웃 (초)
    REQUEST_TIMEOUT_SECONDS: float = 10.0
    REFRESH_TIMEOUT_SECONDS: float = 15.0

    # 매 시 45분 자동 새로고침 (초단기 실황 발표 이후)
    AUTO_REFRESH_ENABLED: bool = True
    AUTO_REFRESH_MINUTE: int = 45

    THEME_STORE_PATH: str = "data/theme.json"
    LOG_DIR: str = "logs"

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    class Config:
        env_file = ".env"

settings = Settings()
