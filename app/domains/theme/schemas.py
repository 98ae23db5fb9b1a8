# app/domains/theme/schemas.py

from pydantic import BaseModel
from typing import Literal


class ThemeUpdate(BaseModel):
    theme: Literal["light", "dark"]


class ThemeResponse(BaseModel):
    theme: Literal["light", "dark"]
