"""Authentication service - OTP login, token refresh and principal lookup."""

from dataclasses import dataclass

from src.commune.core.config import get_settings
from src.commune.core.exceptions import UnauthorizedError, UnauthorizedReason
from src.commune.core.logging import get_logger
from src.commune.core.security import PrincipalClaims
from src.commune.models.principal import User
from src.commune.repositories import PrincipalRepository
from src.commune.services.otp_service import OtpService
from src.commune.services.token_service import TokenService

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


class AuthService:
    """Ties OTP verification to token issuance.

    Tokens are stateless. When ``token_recheck_principal_status`` is enabled
    the principal is reloaded on every authenticated request and on refresh,
    and anyone no longer active is rejected.
    """

    def __init__(
        self,
        otp_service: OtpService,
        token_service: TokenService,
        principal_repo: PrincipalRepository,
    ):
        self.otp_service = otp_service
        self.token_service = token_service
        self.principal_repo = principal_repo

    async def login(self, email: str, code: str) -> LoginResult:
        """Consume an OTP and mint a bearer token for its principal."""
        claims = await self.otp_service.verify(email, code)
        user = await self.principal_repo.get_by_id(claims.principal_id)
        if user is None:
            raise UnauthorizedError("User not found", reason=UnauthorizedReason.INACTIVE)

        token = self.token_service.mint(claims)
        logger.info("Login successful", user_id=user.id, role=claims.role.value)
        return LoginResult(token=token, user=user)

    async def authenticate(self, token: str) -> PrincipalClaims:
        """Verify a bearer token, re-checking the principal when configured."""
        claims = self.token_service.verify(token)
        if get_settings().token_recheck_principal_status:
            await self.require_active(claims)
        return claims

    async def refresh(self, token: str) -> str:
        """Re-mint a valid token's claims with a fresh expiry."""
        await self.authenticate(token)
        return self.token_service.refresh(token)

    async def require_active(self, claims: PrincipalClaims) -> User:
        """Load the principal behind ``claims``; reject if missing or not active."""
        user = await self.principal_repo.get_by_id(claims.principal_id)
        if user is None or not user.is_active:
            logger.warning("Token for inactive principal", user_id=claims.principal_id)
            raise UnauthorizedError(
                "User not found or inactive", reason=UnauthorizedReason.INACTIVE
            )
        return user
