# app/domains/theme/service.py

import json
import logging
import os
import tempfile

from app.core.config import settings

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
THEMES = ("light", "dark")
DEFAULT_THEME = "light"


class ThemeStore:
    """
    화면 테마(다크/라이트) 저장소
    - {"theme": "dark"} 형태의 JSON 파일 하나에 저장
    - 파일이 없거나 깨져 있으면 light
    """

    def __init__(self, path: str = None):
        self.path = path or settings.THEME_STORE_PATH
        self._theme = self._load()

    def _load(self) -> str:
        if not os.path.exists(self.path):
            return DEFAULT_THEME
        try:
            with open(self.path, encoding="utf-8") as f:
                value = json.load(f).get(THEME_KEY)
        except (OSError, ValueError, AttributeError) as e:
            logger.warning(f"⚠️ 테마 파일 읽기 실패, 기본값 사용: {e}")
            return DEFAULT_THEME
        return value if value in THEMES else DEFAULT_THEME

    def get(self) -> str:
        return self._theme

    def set(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValueError(f"지원하지 않는 테마: {theme}")

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        # 임시 파일에 다 쓴 뒤 교체 (쓰다 죽어도 기존 파일은 온전)
        fd, tmp_path = tempfile.mkstemp(dir=directory or ".", prefix=".theme-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({THEME_KEY: theme}, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        self._theme = theme
        return theme

    def toggle(self) -> str:
        return self.set("light" if self._theme == "dark" else "dark")
