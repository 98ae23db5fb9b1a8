# app/core/logger.py

import logging
import os
import json
from logging.handlers import TimedRotatingFileHandler
from datetime import datetime

from app.core.config import settings


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # logger.error(..., extra={"source": "getVilageFcst"}) 처럼 넘긴 실패 소스
        source = getattr(record, "source", None)
        if source:
            log_record["source"] = source
        # 에러 발생 시 파일 위치와 상세 스택 정보 추가
        if record.levelno >= logging.ERROR:
            log_record["location"] = f"{record.pathname}:{record.lineno}"
            if record.exc_info:
                log_record["stack_trace"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False)


def setup_logging(log_dir: str = None):
    log_dir = log_dir or settings.LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # uvicorn --reload 등으로 두 번 호출돼도 핸들러가 중복되지 않도록
    if getattr(root_logger, "_dashboard_configured", False):
        return

    # 외부 라이브러리 노이즈 차단 (httpx는 요청마다 INFO 로그를 찍음)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("apscheduler").setLevel(logging.ERROR)
    logging.getLogger("uvicorn.access").setLevel(logging.ERROR)
    logging.getLogger("watchfiles").setLevel(logging.ERROR)

    # 파일 핸들러 (7일 보관)
    file_handler = TimedRotatingFileHandler(
        filename=os.path.join(log_dir, "dashboard.log"),
        when="midnight", interval=1, backupCount=7, encoding="utf-8"
    )
    file_handler.setFormatter(JsonFormatter())
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(JsonFormatter())
    root_logger.addHandler(console_handler)

    root_logger._dashboard_configured = True
