# app/domains/theme/router.py

from fastapi import APIRouter, Depends

from app.core.dependencies import get_theme_store
from app.domains.theme.schemas import ThemeResponse, ThemeUpdate
from app.domains.theme.service import ThemeStore

router = APIRouter()


@router.get("", response_model=ThemeResponse)
async def get_theme(store: ThemeStore = Depends(get_theme_store)):
    return {"theme": store.get()}


@router.put("", response_model=ThemeResponse)
async def update_theme(data: ThemeUpdate, store: ThemeStore = Depends(get_theme_store)):
    return {"theme": store.set(data.theme)}


@router.post("/toggle", response_model=ThemeResponse)
async def toggle_theme(store: ThemeStore = Depends(get_theme_store)):
    return {"theme": store.toggle()}
