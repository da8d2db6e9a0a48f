"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.commune.api.dependencies.db import DBSession
from src.commune.api.dependencies.repositories import AccessRepo, OtpRepo, PrincipalRepo
from src.commune.core.notifications import EmailOtpDelivery, OtpDelivery
from src.commune.services import (
    AuthorizationService,
    AuthService,
    OtpService,
    PermissionResolver,
    TokenService,
    UserService,
)


def get_otp_delivery() -> OtpDelivery:
    """Get the delivery channel for one-time codes."""
    return EmailOtpDelivery()


def get_token_service() -> TokenService:
    return TokenService()


OtpDeliveryDep = Annotated[OtpDelivery, Depends(get_otp_delivery)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_otp_service(
    principal_repo: PrincipalRepo,
    otp_repo: OtpRepo,
    session: DBSession,
    delivery: OtpDeliveryDep,
) -> OtpService:
    """Get OTP service."""
    return OtpService(principal_repo, otp_repo, session, delivery)


OtpServiceDep = Annotated[OtpService, Depends(get_otp_service)]


def get_auth_service(
    otp_service: OtpServiceDep,
    token_service: TokenServiceDep,
    principal_repo: PrincipalRepo,
) -> AuthService:
    """Get auth service."""
    return AuthService(otp_service, token_service, principal_repo)


def get_authorization_service(access_repo: AccessRepo) -> AuthorizationService:
    """Get authorization service backed by the permission resolver."""
    return AuthorizationService(PermissionResolver(access_repo))


def get_user_service(principal_repo: PrincipalRepo, session: DBSession) -> UserService:
    """Get user service."""
    return UserService(principal_repo, session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
AuthorizationServiceDep = Annotated[AuthorizationService, Depends(get_authorization_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
