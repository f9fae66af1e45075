# models/contact.py
import re
from typing import Optional, Dict, Iterable
from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError
from email_validator import validate_email, EmailNotValidError

CONTACT_FIELDS = ("name", "email", "subject", "message")

NAME_PATTERN = re.compile(r'^[a-zA-Z\s]+$')


def _fail(message: str):
    raise PydanticCustomError("contact_field", message)


def _check_length(value: str, label: str, minimum: Optional[int] = None, maximum: Optional[int] = None):
    if not value:
        _fail(f"{label} is required")
    if minimum is not None and len(value) < minimum:
        _fail(f"{label} must be at least {minimum} characters")
    if maximum is not None and len(value) > maximum:
        _fail(f"{label} must be less than {maximum} characters")


def _check_email(value: str) -> str:
    if not value:
        _fail("Email is required")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        _fail("Please enter a valid email address")
    if len(value) > 100:
        _fail("Email must be less than 100 characters")
    return value


class ContactForm(BaseModel):
    name: str
    email: str
    subject: str
    message: str

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        _check_length(v, "Name", 2, 50)
        if not NAME_PATTERN.match(v):
            _fail("Name can only contain letters and spaces")
        return v

    @field_validator('email')
    @classmethod
    def validate_email_address(cls, v):
        return _check_email(v)

    @field_validator('subject')
    @classmethod
    def validate_subject(cls, v):
        _check_length(v, "Subject", 5, 100)
        return v

    @field_validator('message')
    @classmethod
    def validate_message(cls, v):
        _check_length(v, "Message", 10, 1000)
        return v


class InterestForm(BaseModel):
    email: str

    @field_validator('email')
    @classmethod
    def validate_email_address(cls, v):
        return _check_email(v)


def validate_contact_fields(values: Dict[str, str], fields: Iterable[str] = CONTACT_FIELDS) -> Dict[str, str]:
    """
    Validate a contact draft and return ``{field: message}`` for the
    requested fields only. An empty dict means those fields are valid.
    """
    wanted = set(fields)
    try:
        ContactForm.model_validate({f: values.get(f, "") for f in CONTACT_FIELDS})
    except ValidationError as e:
        errors = {}
        for err in e.errors():
            field = err["loc"][0] if err["loc"] else None
            if field in wanted and field not in errors:
                errors[field] = err["msg"]
        return errors
    return {}


def validate_interest_email(email: str) -> Optional[str]:
    try:
        InterestForm(email=email)
    except ValidationError as e:
        return e.errors()[0]["msg"]
    return None


class Attachment(BaseModel):
    filename: str
    content_type: str
    content: bytes
    size: int
    size_label: str

    def summary(self) -> dict:
        return {
            "filename": self.filename,
            "content_type": self.content_type,
            "size": self.size,
            "size_label": self.size_label,
        }


# Request bodies for the contact routes
class FieldUpdate(BaseModel):
    name: str
    value: str


class InterestRequest(BaseModel):
    email: str
