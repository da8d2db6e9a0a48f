"""Authentication dependencies."""

from typing import Annotated

from fastapi import Depends, Header

from src.commune.api.dependencies.services import AuthServiceDep
from src.commune.core.exceptions import UnauthorizedError, UnauthorizedReason
from src.commune.core.logging import bind_principal_context
from src.commune.core.security import PrincipalClaims


def get_bearer_token(authorization: Annotated[str | None, Header()] = None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthorizedError(
            "Missing or invalid authorization header",
            reason=UnauthorizedReason.MISSING_TOKEN,
        )

    token = authorization[7:].strip()
    if not token:
        raise UnauthorizedError(
            "Missing or invalid authorization header",
            reason=UnauthorizedReason.MISSING_TOKEN,
        )
    return token


BearerToken = Annotated[str, Depends(get_bearer_token)]


async def get_current_principal(token: BearerToken, auth_service: AuthServiceDep) -> PrincipalClaims:
    """Validate the bearer token and return its claims.

    Claims are taken from the token as minted unless
    ``token_recheck_principal_status`` is enabled.
    """
    claims = await auth_service.authenticate(token)
    bind_principal_context(claims.principal_id, claims.role.value, claims.email)
    return claims


CurrentPrincipal = Annotated[PrincipalClaims, Depends(get_current_principal)]
