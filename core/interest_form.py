import logging
import threading
from typing import List, Optional
from models.contact import validate_interest_email
from models.notification import Notification
from services.portfolio_api import PortfolioClient, PortfolioAPIError

logger = logging.getLogger(__name__)

INTEREST_SUCCESS = "Thank you for showing interest! We've sent you a confirmation email."
INTEREST_FAILURE = "Failed to send email. Please try again."


class InterestForm:
    """Single-field quick email form; same submit contract as the contact wizard."""

    def __init__(self, client: PortfolioClient):
        self.client = client
        self.email = ""
        self.error: Optional[str] = None
        self.notifications: List[Notification] = []
        self.is_submitting = False
        self._submit_lock = threading.Lock()

    def submit(self, email: str) -> bool:
        self.email = email
        self.error = validate_interest_email(email)
        if self.error:
            return False
        if not self._submit_lock.acquire(blocking=False):
            return False

        self.is_submitting = True
        try:
            self.client.send_interest_email(email)
        except PortfolioAPIError as e:
            logger.error(f"Interest email error: {e}")
            self.notifications.append(Notification.error(INTEREST_FAILURE))
            return False
        finally:
            self.is_submitting = False
            self._submit_lock.release()

        self.notifications.append(Notification.success(INTEREST_SUCCESS))
        self.email = ""
        return True

    def drain_notifications(self) -> List[Notification]:
        pending, self.notifications = self.notifications, []
        return pending

    def state(self) -> dict:
        return {"email": self.email, "error": self.error, "is_submitting": self.is_submitting}
