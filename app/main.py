# app/main.py
import logging
from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logger import setup_logging
from app.core.lifespan import lifespan
from app.middleware import APIAccessLoggerMiddleware

# 라우터 임포트
from app.domains.dashboard.router import router as dashboard_router
from app.domains.location.router import router as location_router
from app.domains.weather.router import router as weather_router
from app.domains.theme.router import router as theme_router

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="대한민국 현재/시간별/3일 날씨 + 대기질 대시보드 API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(
    APIAccessLoggerMiddleware,
)

# 로깅 설정 활성화
setup_logging()
logger = logging.getLogger("api_monitor")

app.include_router(dashboard_router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(location_router, prefix="/api/location", tags=["Location"])
app.include_router(weather_router, prefix="/api/weather", tags=["Weather"])
app.include_router(theme_router, prefix="/api/theme", tags=["Theme"])


@app.get("/")
def health_check():
    return {"status": "ok", "message": "Weather Dashboard is Running"}


# ==========================================================
# 전역 에러 핸들러
# ==========================================================

# 1. 예상치 못한 시스템 에러 (500)
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"🛑 [System Error] {request.url} : {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "status": "error",
            "message": "서버 내부 오류가 발생했습니다. 잠시 후 다시 시도해주세요.",
            "path": str(request.url)
        },
    )


# 2. 의도한 에러 (HTTPException)
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": "fail",
            "message": exc.detail,
            "code": exc.status_code
        },
        headers=exc.headers,
    )


# 3. 입력 형식 오류 (예: 위도에 200을 넣은 경우)
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    error_details = exc.errors()
    logger.error(f"❌ VALIDATION_ERROR | {request.url} | Details: {error_details}")

    return JSONResponse(
        status_code=422,
        content={
            "status": "fail",
            "message": "입력 값이 올바르지 않습니다.",
            "details": jsonable_errors(error_details)
        },
    )


def jsonable_errors(errors: list) -> list:
    # pydantic v2 에러의 ctx에는 예외 객체가 들어있어 그대로는 직렬화 불가
    return [{k: v for k, v in err.items() if k != "ctx"} for err in errors]
