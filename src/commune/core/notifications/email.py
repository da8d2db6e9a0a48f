"""Email client using Resend API."""

import html
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

import resend

from src.commune.core.config import get_settings
from src.commune.core.logging import get_logger, recipient_fields
from src.commune.models.enums import OtpPurpose

logger = get_logger(__name__)

# Thread pool for email sending with timeout support
_email_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="email_sender")

_BODY_STYLE = (
    "font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; "
    "line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;"
)
_CODE_STYLE = (
    "background: #f8f9fa; border: 2px dashed #667eea; border-radius: 8px; padding: 20px; "
    "text-align: center; font-size: 32px; font-weight: bold; color: #667eea; "
    "letter-spacing: 4px; font-family: 'Courier New', monospace;"
)
_MUTED_STYLE = "color: #666; font-size: 14px;"

_SUBJECTS = {
    OtpPurpose.LOGIN: "Login OTP - {app_name}",
    OtpPurpose.RESEND: "New Login OTP - {app_name}",
}


def send_otp_email(to: str, code: str, purpose: OtpPurpose) -> bool:
    """Send a one-time login code.

    Args:
        to: Recipient email address
        code: The one-time code (never logged)
        purpose: Selects the subject line (first code vs. resent code)

    Returns:
        True if email was sent (or skipped in dev mode), False on error
    """
    settings = get_settings()

    if not settings.resend_api_key:
        # Dev mode: nothing is sent and the code is not logged
        logger.warning(
            "RESEND_API_KEY not set - email not sent",
            email_type=f"otp_{purpose.value}",
            **recipient_fields(to),
        )
        return True

    resend.api_key = settings.resend_api_key

    def _send() -> None:
        resend.Emails.send(
            {
                "from": settings.email_from,
                "to": [to],
                "subject": _SUBJECTS[purpose].format(app_name=settings.app_name),
                "html": _get_otp_email_html(code, settings.app_name, settings.otp_expire_minutes),
            }
        )

    try:
        # Use thread pool with timeout to prevent hanging on slow API responses
        future = _email_executor.submit(_send)
        future.result(timeout=settings.email_send_timeout_seconds)
        logger.info("OTP email sent", purpose=purpose.value, **recipient_fields(to))
        return True
    except FuturesTimeoutError:
        logger.error(
            "Email send timed out",
            timeout=settings.email_send_timeout_seconds,
            **recipient_fields(to),
        )
        return False
    except Exception as e:
        logger.error("Failed to send OTP email", error=str(e), **recipient_fields(to))
        return False


def _get_otp_email_html(code: str, app_name: str, expire_minutes: int) -> str:
    """Generate HTML content for the OTP email."""
    safe_app_name = html.escape(app_name)
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="{_BODY_STYLE}">
    <h1 style="color: #667eea; margin-bottom: 24px;">{safe_app_name}</h1>
    <h2>Login Verification Code</h2>
    <p>Please use the verification code below to complete your login:</p>
    <div style="{_CODE_STYLE}">{html.escape(code)}</div>
    <p style="{_MUTED_STYLE}">This code expires in {expire_minutes} minutes.</p>
    <p style="{_MUTED_STYLE} margin-top: 32px;">
        Never share this code with anyone. If you didn't request it,
        you can safely ignore this email.
    </p>
</body>
</html>"""
