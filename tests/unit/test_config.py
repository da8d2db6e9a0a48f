"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from src.commune.core.config import Settings

pytestmark = pytest.mark.unit

VALID_SECRET = "x" * 32


def test_defaults_match_otp_policy() -> None:
    settings = Settings(database_url="sqlite+aiosqlite://", jwt_secret_key=VALID_SECRET)

    assert settings.otp_length == 6
    assert settings.otp_expire_minutes == 10
    assert settings.otp_max_attempts == 3
    assert settings.otp_resend_cooldown_seconds == 60
    assert settings.token_recheck_principal_status is False


@pytest.mark.parametrize(
    "secret",
    ["change-this-to-a-secure-random-string", "too-short"],
    ids=["placeholder", "short"],
)
def test_weak_jwt_secret_rejected(secret: str) -> None:
    with pytest.raises(ValidationError):
        Settings(database_url="sqlite+aiosqlite://", jwt_secret_key=secret)


def test_wildcard_cors_origin_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(
            database_url="sqlite+aiosqlite://",
            jwt_secret_key=VALID_SECRET,
            cors_origins=["*"],
        )


@pytest.mark.parametrize("length", [3, 11])
def test_otp_length_outside_stored_width_rejected(length: int) -> None:
    with pytest.raises(ValidationError):
        Settings(
            database_url="sqlite+aiosqlite://",
            jwt_secret_key=VALID_SECRET,
            otp_length=length,
        )
