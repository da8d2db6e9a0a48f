"""Security utilities.

Re-exports all security-related functions for convenience.
"""

from src.commune.core.security.claims import PrincipalClaims
from src.commune.core.security.crypto import (
    TokenExpired,
    TokenInvalid,
    codes_match,
    create_access_token,
    decode_access_token,
    generate_otp,
)

__all__ = [
    # Claims
    "PrincipalClaims",
    # Crypto
    "TokenExpired",
    "TokenInvalid",
    "codes_match",
    "create_access_token",
    "decode_access_token",
    "generate_otp",
]
