import re
from typing import Any, Mapping, Optional

from pydantic import BaseModel

# local part, "@", domain with at least one dot, no whitespace anywhere
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MISSING_FIELDS = "Missing required fields"
INVALID_EMAIL = "Invalid email"

REQUIRED_FIELDS = ("name", "email", "message")


class SubmissionError(ValueError):
    """A contact form payload the caller has to fix."""


class ContactSubmission(BaseModel):
    name: str
    email: str
    message: str


def is_valid_email(value: str) -> bool:
    return EMAIL_RE.fullmatch(value) is not None


def _field(payload: Mapping[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if not value:
        return None
    if isinstance(value, (dict, list)):
        return None
    return value if isinstance(value, str) else str(value)


def parse_submission(payload: Any) -> ContactSubmission:
    """Check a decoded request body and return the submission it carries.

    Anything that is not a JSON object is treated as an empty one, so the
    caller gets the same "missing fields" answer for a blank form and for a
    garbled body.
    """
    if not isinstance(payload, Mapping):
        payload = {}

    values = {key: _field(payload, key) for key in REQUIRED_FIELDS}
    if any(v is None for v in values.values()):
        raise SubmissionError(MISSING_FIELDS)

    if not is_valid_email(values["email"]):
        raise SubmissionError(INVALID_EMAIL)

    return ContactSubmission(**values)
