"""Out-of-band delivery of one-time codes."""

from abc import ABC, abstractmethod

from src.commune.core.notifications.email import send_otp_email
from src.commune.models.enums import OtpPurpose


class OtpDelivery(ABC):
    """Hands a one-time code to its holder.

    A failed delivery never invalidates the stored code; the holder can still
    use it or request a new one.
    """

    @abstractmethod
    def send(self, destination: str, code: str, purpose: OtpPurpose) -> bool:
        """Deliver ``code``. Return False on failure."""


class EmailOtpDelivery(OtpDelivery):
    """Deliver codes by email through Resend."""

    def send(self, destination: str, code: str, purpose: OtpPurpose) -> bool:
        return send_otp_email(destination, code, purpose)
