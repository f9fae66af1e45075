from .settings import *

__all__ = [
    "BASE_DIR",
    "STATIC_DIR",
    "DATABASE_URL",
    "PORTFOLIO_API_BASE_URL",
    "PORTFOLIO_API_TIMEOUT",
    "GROQ_API_KEY",
    "GROQ_MODEL",
    "SESSION_COOKIE_NAME",
    "THEME_STORAGE_KEY",
    "MAX_ATTACHMENT_BYTES",
    "ALLOWED_ATTACHMENT_TYPES",
]
