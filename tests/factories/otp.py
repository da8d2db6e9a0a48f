"""OTP record factory."""

from datetime import timedelta

from polyfactory import Use

from src.commune.models.enums import OtpPurpose
from src.commune.models.otp import OtpRecord
from tests.factories.base import BaseFactory, unique_suffix, utc_now


class OtpRecordFactory(BaseFactory):
    """Factory for generating a live OtpRecord."""

    __model__ = OtpRecord

    id = None
    email = Use(lambda: f"user_{unique_suffix()}@example.com")
    code = "123456"
    purpose = OtpPurpose.LOGIN.value
    created_at = Use(utc_now)
    expires_at = Use(lambda: utc_now() + timedelta(minutes=10))
    attempts = 0
    used = False

    @classmethod
    def expired(cls, **kwargs):
        created = utc_now() - timedelta(minutes=11)
        return cls.build(created_at=created, expires_at=created + timedelta(minutes=10), **kwargs)
