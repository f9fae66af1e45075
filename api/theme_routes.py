from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Optional
from api.dependencies import get_theme_store
from services.theme_store import ThemeStore

router = APIRouter(prefix="/theme", tags=["theme"])


class ThemeTokens(BaseModel):
    root_class: Optional[str] = None
    background: str
    text: str
    changed_at: int


class ThemeResponse(BaseModel):
    is_dark_mode: bool
    theme: str
    tokens: ThemeTokens


@router.get("", response_model=ThemeResponse)
def get_theme(store: ThemeStore = Depends(get_theme_store)):
    return store.state()


@router.post("/toggle", response_model=ThemeResponse)
def toggle_theme(store: ThemeStore = Depends(get_theme_store)):
    """Flip between dark and light mode and persist the choice"""
    store.toggle()
    return store.state()
