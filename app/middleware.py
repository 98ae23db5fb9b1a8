# app/middleware.py
import time
import logging
import json
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("api_monitor")


class APIAccessLoggerMiddleware(BaseHTTPMiddleware):
    """
    요청별 처리 시간 로그
    처리되지 않은 예외는 그대로 올려보내서 main.py 전역 핸들러가 500으로 응답
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        method = request.method
        path = request.url.path

        response = await call_next(request)
        duration = time.time() - start_time

        if response.status_code >= 400:
            error_log = {
                "event": "HTTP_ERROR",
                "status": response.status_code,
                "method": method,
                "url": path,
                "query": request.url.query,
                "duration": f"{duration:.4f}s"
            }
            logger.warning(json.dumps(error_log, ensure_ascii=False))
        else:
            logger.info(f"SUCCESS | {method} {path} | {response.status_code} | Time: {duration:.4f}s")

        return response
