"""Notification services - email delivery of one-time codes."""

from src.commune.core.notifications.delivery import EmailOtpDelivery, OtpDelivery
from src.commune.core.notifications.email import send_otp_email

__all__ = [
    "EmailOtpDelivery",
    "OtpDelivery",
    "send_otp_email",
]
