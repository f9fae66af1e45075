import logging
import threading
import time
from cachetools import TTLCache
from config.settings import CONTENT_CACHE_TTL, CONTENT_FETCH_RETRIES, CONTENT_FETCH_BACKOFF
from models.portfolio import ResourceResult, PortfolioSnapshot, About, Project, Experience, parse_record, parse_records
from services.portfolio_api import PortfolioClient, PortfolioAPIError

logger = logging.getLogger(__name__)

RESOURCES = {
    "about": "get_about_primary",
    "skills": "get_skills",
    "projects": "get_projects",
    "experience": "get_experience",
}


def is_transient(error: PortfolioAPIError) -> bool:
    """Connection failures and 5xx responses may succeed on a later attempt; 4xx never will."""
    return error.status_code is None or error.status_code >= 500


class ContentCache:
    """Query layer for section content: cached per resource, retried with backoff on failure."""

    def __init__(self, client: PortfolioClient, ttl: int = CONTENT_CACHE_TTL, retries: int = CONTENT_FETCH_RETRIES,
                 backoff: float = CONTENT_FETCH_BACKOFF):
        self.client = client
        self.retries = retries
        self.backoff = backoff
        self._cache = TTLCache(maxsize=len(RESOURCES), ttl=ttl)
        self._lock = threading.Lock()

    def get(self, resource: str) -> ResourceResult:
        if resource not in RESOURCES:
            raise KeyError(resource)

        with self._lock:
            cached = self._cache.get(resource)
        if cached is not None:
            return cached

        fetch = getattr(self.client, RESOURCES[resource])
        attempt = 0
        while True:
            try:
                result = fetch()
                break
            except PortfolioAPIError as e:
                if attempt >= self.retries or not is_transient(e):
                    logger.error(f"Giving up on '{resource}' after {attempt + 1} attempts: {e}")
                    raise
                delay = self.backoff * (2 ** attempt)
                attempt += 1
                logger.warning(f"Retrying '{resource}' in {delay:.1f}s ({attempt}/{self.retries}): {e}")
                time.sleep(delay)

        with self._lock:
            self._cache[resource] = result
        return result

    def invalidate(self):
        with self._lock:
            self._cache.clear()

    def _load_optional(self, resource: str):
        try:
            return self.get(resource).items
        except PortfolioAPIError:
            return None

    def snapshot(self) -> PortfolioSnapshot:
        about = self._load_optional("about")
        projects = self._load_optional("projects")
        experience = self._load_optional("experience")
        return PortfolioSnapshot(
            about=parse_record(About, about[0]) if about else None,
            projects=parse_records(Project, projects) if projects is not None else None,
            experience=parse_records(Experience, experience) if experience is not None else None,
        )
