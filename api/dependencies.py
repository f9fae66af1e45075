from fastapi import HTTPException, Request, Response, Cookie, status
from typing import Optional
from config.settings import SESSION_COOKIE_NAME, SESSION_TTL_SECONDS
from managers.session_manager import VisitorSession
from services.content_cache import ContentCache
from services.theme_store import ThemeStore


def get_theme_store(request: Request) -> ThemeStore:
    store = getattr(request.app.state, "theme_store", None)
    if store is None:
        raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, "Theme store is not initialized")
    return store


def get_content_cache(request: Request) -> ContentCache:
    return request.app.state.content_cache


def get_visitor(
    request: Request,
    response: Response,
    session_id: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
) -> VisitorSession:
    """
    Resolve the visitor's session from the cookie, creating one when the
    cookie is missing or has expired.
    """
    sessions = request.app.state.sessions
    new_id, visitor = sessions.get_or_create(session_id)
    if new_id != session_id:
        response.set_cookie(
            SESSION_COOKIE_NAME,
            new_id,
            max_age=SESSION_TTL_SECONDS,
            httponly=True,
            samesite="lax",
        )
    return visitor
