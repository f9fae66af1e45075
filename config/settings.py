import os
import logging
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Base directories
BASE_DIR = Path(__file__).parent.parent
STATIC_DIR = BASE_DIR / "static"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///portfolio.db")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Portfolio REST backend
PORTFOLIO_API_ENDPOINT = os.getenv("PORTFOLIO_API_ENDPOINT", "http://localhost:8080")
PORTFOLIO_API_BASE_URL = PORTFOLIO_API_ENDPOINT.rstrip("/") + "/api"
PORTFOLIO_API_TIMEOUT = float(os.getenv("PORTFOLIO_API_TIMEOUT", "10"))

# Content cache (stale time for section data)
CONTENT_CACHE_TTL = int(os.getenv("CONTENT_CACHE_TTL", "300"))
CONTENT_FETCH_RETRIES = int(os.getenv("CONTENT_FETCH_RETRIES", "3"))
CONTENT_FETCH_BACKOFF = float(os.getenv("CONTENT_FETCH_BACKOFF", "0.5"))

# API Keys
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
GROQ_MAX_TOKENS = 500
GROQ_TEMPERATURE = 0.7
GROQ_TIMEOUT = float(os.getenv("GROQ_TIMEOUT", "30"))

if not GROQ_API_KEY:
    logger.warning("GROQ_API_KEY is not set, the chat assistant will answer with its fallback message")

# Visitor sessions
SESSION_COOKIE_NAME = "portfolio_session"
SESSION_TTL_SECONDS = int(os.getenv("SESSION_TTL_SECONDS", "3600"))
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "5000"))

# Theme
THEME_STORAGE_KEY = "theme"
DEFAULT_DARK_MODE = True

# Contact attachments
MAX_ATTACHMENT_BYTES = 5 * 1024 * 1024
ALLOWED_ATTACHMENT_TYPES = (
    "image/jpeg",
    "image/png",
    "image/gif",
    "application/pdf",
    "text/plain",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)

# Portfolio owner
OWNER_NAME = os.getenv("OWNER_NAME", "Raj Shekhar Singh")
OWNER_SHORT_NAME = os.getenv("OWNER_SHORT_NAME", "Raj")
OWNER_EMAIL = os.getenv("OWNER_EMAIL", "rajsingh170901@gmail.com")
OWNER_LOCATION = os.getenv("OWNER_LOCATION", "Bangalore, India")
HERO_ROLES = ["Software Developer", "Big Data Engineer"]

# Application Configuration
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
