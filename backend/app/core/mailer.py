# app/core/mailer.py
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import resend
from resend.exceptions import ResendError

from app.core.settings import settings

log = logging.getLogger("uvicorn.error")


class MailerError(Exception):
    """Raised when the provider rejects a message or is unreachable."""


@dataclass
class OutboundEmail:
    sender: str
    to: List[str]
    subject: str
    html: str
    text: str
    reply_to: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "from": self.sender,
            "to": list(self.to),
            "subject": self.subject,
            "html": self.html,
            "text": self.text,
        }
        if self.reply_to:
            params["reply_to"] = self.reply_to
        return params


class EmailSender(ABC):
    """Anything that can deliver an OutboundEmail and hand back a message id."""

    @abstractmethod
    def send(self, email: OutboundEmail) -> str:
        ...


class ResendSender(EmailSender):
    def __init__(self, api_key: str):
        if not api_key:
            raise MailerError("RESEND_API_KEY is missing in environment")
        self.api_key = api_key

    def send(self, email: OutboundEmail) -> str:
        # The SDK reads its key from module state
        resend.api_key = self.api_key
        try:
            resp = resend.Emails.send(email.to_params())
        except ResendError as exc:
            raise MailerError(f"Resend error: {exc}") from exc

        message_id = (resp or {}).get("id")
        if not message_id:
            raise MailerError(f"Resend error: unexpected response {resp!r}")
        log.info(f"[mailer] sent message id={message_id}")
        return message_id


_mailer: Optional[EmailSender] = None


def get_mailer() -> Optional[EmailSender]:
    """Return the process-wide sender, or None when no API key is configured."""
    global _mailer
    if _mailer is not None:
        return _mailer
    if not settings.resend_api_key:
        return None
    _mailer = ResendSender(settings.resend_api_key)
    return _mailer
