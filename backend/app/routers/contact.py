# app/routers/contact.py
import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.core.mailer import EmailSender, MailerError, get_mailer
from app.core.rate_limit import api_rate_limit
from app.core.settings import settings
from app.lib.contact_email import build_contact_email
from app.lib.submission import SubmissionError, parse_submission

router = APIRouter(prefix="/api", tags=["contact"])
log = logging.getLogger("uvicorn.error")

SEND_FAILED = "Failed to send message"
ORIGIN_REJECTED = "Not allowed by CORS"


def _fail(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": error})


async def _read_json(request: Request) -> Any:
    # only JSON bodies are parsed; anything else reads as an empty form
    media_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if media_type != "application/json":
        return None
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None


@router.post("/contact")
@api_rate_limit()
async def contact(request: Request, mailer: Optional[EmailSender] = Depends(get_mailer)):
    origin = request.headers.get("origin")
    if origin and not settings.is_allowed_origin(origin):
        log.warning(f"[contact] rejected request from origin {origin}")
        return _fail(403, ORIGIN_REJECTED)

    try:
        submission = parse_submission(await _read_json(request))
        if mailer is None:
            raise MailerError("Resend is not configured. Set RESEND_API_KEY in your environment")

        email = build_contact_email(submission, settings)
        await run_in_threadpool(mailer.send, email)
    except SubmissionError as exc:
        return _fail(400, str(exc))
    except Exception as exc:
        log.exception(f"[contact] send failed: {exc}")
        return _fail(500, SEND_FAILED)

    log.info(f"[contact] delivered message from {submission.email}")
    return {"ok": True}
