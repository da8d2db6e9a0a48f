from src.commune.services.auth_service import AuthService, LoginResult
from src.commune.services.otp_service import OtpIssueResult, OtpService
from src.commune.services.permission_service import AuthorizationService, PermissionResolver
from src.commune.services.token_service import TokenService
from src.commune.services.user_service import UserService

__all__ = [
    "AuthService",
    "AuthorizationService",
    "LoginResult",
    "OtpIssueResult",
    "OtpService",
    "PermissionResolver",
    "TokenService",
    "UserService",
]
