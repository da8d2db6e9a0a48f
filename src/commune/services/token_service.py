"""Bearer token service - mint, verify and refresh signed access tokens."""

from datetime import timedelta

from src.commune.core.exceptions import UnauthorizedError, UnauthorizedReason
from src.commune.core.security import (
    PrincipalClaims,
    TokenExpired,
    TokenInvalid,
    create_access_token,
    decode_access_token,
)


class TokenService:
    """Stateless token service.

    Verification never touches storage: a token stays valid until expiry even
    if the principal is deactivated or changes role after mint.
    """

    def mint(self, claims: PrincipalClaims, expires_delta: timedelta | None = None) -> str:
        """Sign a token carrying ``claims``."""
        return create_access_token(claims.to_payload(), expires_delta)

    def verify(self, token: str) -> PrincipalClaims:
        """Return the claims of a valid token.

        Raises:
            UnauthorizedError: reason ``expired`` or ``invalid_token``.
        """
        try:
            payload = decode_access_token(token)
        except TokenExpired as e:
            raise UnauthorizedError(
                "Token has expired", reason=UnauthorizedReason.EXPIRED
            ) from e
        except TokenInvalid as e:
            raise UnauthorizedError("Invalid token", reason=UnauthorizedReason.INVALID_TOKEN) from e

        try:
            return PrincipalClaims.from_payload(payload)
        except ValueError as e:
            raise UnauthorizedError(
                "Invalid token payload", reason=UnauthorizedReason.INVALID_TOKEN
            ) from e

    def refresh(self, token: str) -> str:
        """Re-mint the claims of a valid token with a fresh expiry."""
        return self.mint(self.verify(token))
