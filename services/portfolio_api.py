import json
import logging
from typing import Any, Optional
import requests
from config.settings import PORTFOLIO_API_BASE_URL, PORTFOLIO_API_TIMEOUT
from models.contact import Attachment
from models.portfolio import ResourceResult, normalize_payload

logger = logging.getLogger(__name__)


class PortfolioAPIError(Exception):
    """Raised for any transport or non-2xx failure talking to the portfolio backend."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class PortfolioClient:
    """
    Thin client for the portfolio REST backend.

    Every call shares one timeout and one error-logging path. Nothing is
    retried here; callers decide whether to try again.
    """

    def __init__(self, base_url: str = PORTFOLIO_API_BASE_URL, timeout: float = PORTFOLIO_API_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def close(self):
        self.session.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.error(f"API Error: {method} {url} -> {status_code}")
            raise PortfolioAPIError(f"{method} {path} failed with status {status_code}",
                                    status_code=status_code, url=url) from e
        except requests.RequestException as e:
            logger.error(f"API Error: {method} {url} -> {e}")
            raise PortfolioAPIError(f"{method} {path} failed: {e}", url=url) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"API Error: {method} {url} returned a non-JSON body")
            raise PortfolioAPIError(f"{method} {path} returned invalid JSON",
                                    status_code=response.status_code, url=url) from e

    def _get(self, path: str) -> ResourceResult:
        return normalize_payload(self._request("GET", path))

    # About
    def get_about_primary(self) -> ResourceResult:
        return self._get("/about/primary")

    def get_about_all(self) -> ResourceResult:
        return self._get("/about")

    def get_about(self, about_id) -> ResourceResult:
        return self._get(f"/about/{about_id}")

    # Skills
    def get_skills(self) -> ResourceResult:
        return self._get("/skills")

    def get_skills_by_category(self, category: str) -> ResourceResult:
        return self._get(f"/skills/category/{category}")

    # Projects
    def get_projects(self) -> ResourceResult:
        return self._get("/projects")

    def get_featured_projects(self) -> ResourceResult:
        return self._get("/projects/featured")

    def get_projects_by_category(self, category: str) -> ResourceResult:
        return self._get(f"/projects/category/{category}")

    # Experience
    def get_experience(self) -> ResourceResult:
        return self._get("/experience")

    # Contact
    def submit_contact(self, contact: dict, attachment: Optional[Attachment] = None):
        files = {
            "contact": ("contact.json", json.dumps(contact), "application/json"),
        }
        if attachment is not None:
            files["file"] = (attachment.filename, attachment.content, attachment.content_type)
        return self._request("POST", "/contact", files=files)

    def send_interest_email(self, email: str):
        return self._request("POST", "/contact/interest", json={"email": email})
