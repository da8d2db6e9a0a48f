"""One-time password storage."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.commune.core.config import OTP_MAX_LENGTH
from src.commune.models.base import utc_now
from src.commune.models.enums import OtpPurpose


class OtpRecord(SQLModel, table=True):
    """A one-time login code.

    At most one live (unused, unexpired) record exists per (email, purpose):
    issuing a new code deletes the previous ones first.
    """

    __tablename__ = "otps"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, index=True)
    code: str = Field(max_length=OTP_MAX_LENGTH)
    purpose: str = Field(default=OtpPurpose.LOGIN.value, max_length=50)
    expires_at: datetime
    attempts: int = Field(default=0)
    used: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, index=True)

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
