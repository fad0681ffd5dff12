from datetime import datetime, timezone
from typing import Optional

from app.core.mailer import OutboundEmail
from app.core.settings import Settings
from app.lib.submission import ContactSubmission

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})


def escape_html(value) -> str:
    if value is None:
        return ""
    return str(value).translate(_HTML_ESCAPES)


def contact_subject(name: str) -> str:
    return f"New Contact Message from {name}"


def render_contact_text(name: str, email: str, message: str) -> str:
    return (
        "You have a new message from your portfolio contact form.\n\n"
        f"Name: {name}\n"
        f"Email: {email}\n\n"
        "Message:\n"
        f"{message}"
    )


def render_contact_html(name: str, email: str, message: str, year: Optional[int] = None) -> str:
    """Render the notification email.

    Plain table layout with inline styles so it survives Gmail, Outlook and
    Apple Mail alike. Every field is escaped before it is interpolated.
    """
    safe_name = escape_html(name)
    safe_email = escape_html(email)
    safe_message = escape_html(message)
    if year is None:
        year = datetime.now(timezone.utc).year

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta http-equiv="x-ua-compatible" content="ie=edge" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>New Contact Message</title>
</head>
<body style="margin:0;padding:0;background-color:#f4f5f7;font-family:Segoe UI, Roboto, Helvetica, Arial, sans-serif;">
  <table role="presentation" cellspacing="0" cellpadding="0" border="0" align="center" width="100%" style="background-color:#f4f5f7;">
    <tr>
      <td>
        <table role="presentation" cellspacing="0" cellpadding="0" border="0" align="center" width="600" style="max-width:600px;margin:32px auto;background:#ffffff;border-radius:12px;overflow:hidden;border:1px solid #e6e8eb;">
          <tr>
            <td style="padding:24px;background:#4f46e5;color:#ffffff;text-align:center;">
              <h1 style="margin:0;font-size:22px;line-height:28px;font-weight:600;">New Contact Form Message</h1>
              <p style="margin:8px 0 0 0;font-size:14px;opacity:.9;">Someone reached out via your portfolio</p>
            </td>
          </tr>
          <tr>
            <td style="padding:24px;">
              <h2 style="margin:0 0 16px 0;font-size:18px;color:#111827;border-bottom:2px solid #f3f4f6;padding-bottom:6px;">Sender Details</h2>
              <table role="presentation" width="100%" cellspacing="0" cellpadding="0" border="0" style="border-collapse:separate;border-spacing:0 12px;">
                <tr>
                  <td style="width:140px;color:#6b7280;font-size:14px;">Name</td>
                  <td style="color:#111827;font-size:14px;font-weight:600;">{safe_name}</td>
                </tr>
                <tr>
                  <td style="width:140px;color:#6b7280;font-size:14px;">Email</td>
                  <td style="color:#111827;font-size:14px;font-weight:600;">
                    <a href="mailto:{safe_email}" style="color:#2563eb;text-decoration:none;">{safe_email}</a>
                  </td>
                </tr>
              </table>
              <h2 style="margin:28px 0 12px 0;font-size:18px;color:#111827;border-bottom:2px solid #f3f4f6;padding-bottom:6px;">Message</h2>
              <div style="padding:18px;border:1px solid #e5e7eb;border-radius:8px;background:#fafafa;color:#111827;white-space:pre-wrap;font-size:14px;line-height:1.6;">{safe_message}</div>
              <div style="margin-top:24px;text-align:center;">
                <a href="mailto:{safe_email}" style="display:inline-block;padding:12px 24px;background:#4f46e5;color:#ffffff;font-size:14px;font-weight:600;text-decoration:none;border-radius:6px;">Reply Now</a>
              </div>
            </td>
          </tr>
          <tr>
            <td style="padding:16px 24px;background:#f9fafb;color:#6b7280;font-size:12px;border-top:1px solid #e6e8eb;text-align:center;">
              <p style="margin:0;">This email was generated by your <strong>Portfolio Contact Form</strong>.</p>
            </td>
          </tr>
        </table>
        <p style="text-align:center;color:#9ca3af;font-size:12px;margin:12px 0 32px 0;">&copy; {year} Portfolio. All rights reserved.</p>
      </td>
    </tr>
  </table>
</body>
</html>
"""


def build_contact_email(submission: ContactSubmission, settings: Settings) -> OutboundEmail:
    name, email, message = submission.name, submission.email, submission.message
    return OutboundEmail(
        sender=settings.from_header,
        to=[settings.to_email],
        subject=contact_subject(name),
        html=render_contact_html(name, email, message),
        text=render_contact_text(name, email, message),
        reply_to=email,
    )
