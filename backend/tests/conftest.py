import os

import pytest

os.environ.setdefault("CORS_ORIGINS", "http://localhost:5173, https://portfolio.example")
os.environ.setdefault("TO_EMAIL", "inbox@portfolio.example")
os.environ.setdefault("FROM_NAME", "Portfolio Contact Form")
os.environ.setdefault("RATE_LIMIT", "10/minute")

from app.core import mailer as mailer_module
from app.core.mailer import EmailSender, MailerError, get_mailer
from app.core.rate_limit import limiter
from app.main import app


class RecordingSender(EmailSender):
    def __init__(self, error: Exception | None = None):
        self.sent = []
        self.error = error

    def send(self, email):
        self.sent.append(email)
        if self.error is not None:
            raise self.error
        return f"msg-{len(self.sent)}"


@pytest.fixture(autouse=True)
def _isolate_app_state(monkeypatch):
    limiter.reset()
    monkeypatch.setattr(mailer_module, "_mailer", None)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def sender():
    fake = RecordingSender()
    app.dependency_overrides[get_mailer] = lambda: fake
    return fake


@pytest.fixture
def failing_sender():
    fake = RecordingSender(error=MailerError("Resend error: domain not verified"))
    app.dependency_overrides[get_mailer] = lambda: fake
    return fake
