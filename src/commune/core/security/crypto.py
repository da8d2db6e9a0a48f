"""Cryptographic utilities - one-time codes and signed bearer tokens."""

import hmac
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from src.commune.core.config import get_settings


class TokenExpired(Exception):
    """Token signature is valid but its exp claim is in the past."""


class TokenInvalid(Exception):
    """Token is malformed, tampered with, or issued for another audience."""


def generate_otp(length: int | None = None) -> str:
    """Generate a uniformly random numeric code, leading zeros preserved."""
    if length is None:
        length = get_settings().otp_length
    return f"{secrets.randbelow(10**length):0{length}d}"


def codes_match(expected: str, provided: str) -> bool:
    """Constant-time comparison of two one-time codes."""
    return hmac.compare_digest(expected.encode(), provided.encode())


def create_access_token(
    claims: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Sign a JWT carrying ``claims`` plus iat/exp/iss/aud."""
    settings = get_settings()
    issued_at = datetime.now(UTC)

    if expires_delta is not None:
        expire = issued_at + expires_delta
    else:
        expire = issued_at + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        **claims,
        "iat": issued_at,
        "exp": expire,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "type": "access",
    }
    return jwt.encode(  # type: ignore[no-any-return]
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT.

    Raises:
        TokenExpired: signature is valid but the token has expired.
        TokenInvalid: bad signature, wrong issuer/audience, or malformed token.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except ExpiredSignatureError as e:
        raise TokenExpired(str(e)) from e
    except JWTError as e:
        raise TokenInvalid(str(e)) from e

    if payload.get("type") != "access":
        raise TokenInvalid("Unexpected token type")
    return payload  # type: ignore[no-any-return]
