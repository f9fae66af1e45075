import logging
import threading
from enum import IntEnum
from typing import Dict, List, Optional
from models.contact import CONTACT_FIELDS, Attachment, validate_contact_fields
from models.notification import Notification
from services.portfolio_api import PortfolioClient, PortfolioAPIError
from utils.file_handlers import check_attachment, AttachmentRejected

logger = logging.getLogger(__name__)

SUBMIT_SUCCESS = "Message sent successfully! I'll get back to you soon."
SUBMIT_FAILURE = "Failed to send message. Please try again."
UPLOAD_SUCCESS = "File uploaded successfully!"


class WizardStep(IntEnum):
    IDENTITY = 1
    SUBJECT = 2
    MESSAGE = 3


STEP_FIELDS = {
    WizardStep.IDENTITY: ("name", "email"),
    WizardStep.SUBJECT: ("subject",),
    WizardStep.MESSAGE: ("message",),
}


def empty_draft() -> Dict[str, str]:
    return {field: "" for field in CONTACT_FIELDS}


class ContactWizard:
    """
    Three-step contact form: identity, subject, then message and attachment.

    Moving forward requires the current step's fields to be valid; moving
    back never does. Submitting is only possible from the last step and
    sends the whole draft in one call. A failed send keeps the draft so the
    visitor can retry without retyping.
    """

    def __init__(self, client: PortfolioClient):
        self.client = client
        self.step = WizardStep.IDENTITY
        self.draft = empty_draft()
        self.errors: Dict[str, str] = {}
        self.attachment: Optional[Attachment] = None
        self.notifications: List[Notification] = []
        self.is_submitting = False
        self._submit_lock = threading.Lock()

    # Draft editing
    def update_field(self, name: str, value: str):
        if name not in self.draft:
            raise KeyError(name)
        self.draft[name] = value
        self._validate((name,))

    def attach_file(self, filename: str, content_type: Optional[str], content: bytes) -> bool:
        try:
            self.attachment = check_attachment(filename, content_type, content)
        except AttachmentRejected as e:
            logger.info(f"Attachment '{filename}' rejected: {e}")
            self.notifications.append(Notification.error(str(e)))
            return False
        self.notifications.append(Notification.success(UPLOAD_SUCCESS))
        return True

    def remove_attachment(self):
        self.attachment = None

    # Navigation
    def _validate(self, fields) -> bool:
        errors = validate_contact_fields(self.draft, fields)
        for field in fields:
            if field in errors:
                self.errors[field] = errors[field]
            else:
                self.errors.pop(field, None)
        return not errors

    def advance(self) -> bool:
        if self.step == WizardStep.MESSAGE:
            return False
        if not self._validate(STEP_FIELDS[self.step]):
            return False
        self.step = WizardStep(self.step + 1)
        return True

    def retreat(self):
        if self.step > WizardStep.IDENTITY:
            self.step = WizardStep(self.step - 1)

    @property
    def is_valid(self) -> bool:
        return not validate_contact_fields(self.draft)

    @property
    def can_submit(self) -> bool:
        return self.step == WizardStep.MESSAGE and not self.is_submitting and self.is_valid

    # Submission
    def submit(self) -> bool:
        if self.step != WizardStep.MESSAGE:
            return False
        if not self._submit_lock.acquire(blocking=False):
            return False
        try:
            if not self._validate(CONTACT_FIELDS):
                return False

            self.is_submitting = True
            contact = {field: self.draft[field] for field in CONTACT_FIELDS}
            try:
                self.client.submit_contact(contact, self.attachment)
            except PortfolioAPIError as e:
                logger.error(f"Contact form error: {e}")
                self.notifications.append(Notification.error(SUBMIT_FAILURE))
                return False

            logger.info("Contact form submitted")
            self.notifications.append(Notification.success(SUBMIT_SUCCESS))
            self.reset()
            return True
        finally:
            self.is_submitting = False
            self._submit_lock.release()

    def reset(self):
        self.draft = empty_draft()
        self.errors = {}
        self.attachment = None
        self.step = WizardStep.IDENTITY

    def drain_notifications(self) -> List[Notification]:
        pending, self.notifications = self.notifications, []
        return pending

    def state(self) -> dict:
        return {
            "step": int(self.step),
            "values": dict(self.draft),
            "errors": dict(self.errors),
            "attachment": self.attachment.summary() if self.attachment else None,
            "is_valid": self.is_valid,
            "is_submitting": self.is_submitting,
            "can_submit": self.can_submit,
        }
