"""FastAPI dependency injection definitions."""

from src.commune.api.dependencies.auth import (
    BearerToken,
    CurrentPrincipal,
    get_bearer_token,
    get_current_principal,
)
from src.commune.api.dependencies.authorization import authorize
from src.commune.api.dependencies.db import DBSession, get_db_session
from src.commune.api.dependencies.repositories import (
    AccessRepo,
    BuildingRepo,
    ComplaintRepo,
    MaintenanceRequestRepo,
    OtpRepo,
    PrincipalRepo,
    get_access_repository,
    get_building_repository,
    get_complaint_repository,
    get_maintenance_request_repository,
    get_otp_repository,
    get_principal_repository,
)
from src.commune.api.dependencies.services import (
    AuthorizationServiceDep,
    AuthServiceDep,
    OtpDeliveryDep,
    OtpServiceDep,
    TokenServiceDep,
    UserServiceDep,
    get_auth_service,
    get_authorization_service,
    get_otp_delivery,
    get_otp_service,
    get_token_service,
    get_user_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "BearerToken",
    "CurrentPrincipal",
    "authorize",
    "get_bearer_token",
    "get_current_principal",
    # Repositories
    "AccessRepo",
    "BuildingRepo",
    "ComplaintRepo",
    "MaintenanceRequestRepo",
    "OtpRepo",
    "PrincipalRepo",
    "get_access_repository",
    "get_building_repository",
    "get_complaint_repository",
    "get_maintenance_request_repository",
    "get_otp_repository",
    "get_principal_repository",
    # Services
    "AuthServiceDep",
    "AuthorizationServiceDep",
    "OtpDeliveryDep",
    "OtpServiceDep",
    "TokenServiceDep",
    "UserServiceDep",
    "get_auth_service",
    "get_authorization_service",
    "get_otp_delivery",
    "get_otp_service",
    "get_token_service",
    "get_user_service",
]
