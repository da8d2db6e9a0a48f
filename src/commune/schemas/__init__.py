from src.commune.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    OtpSentData,
    OtpSentResponse,
    RefreshResponse,
    VerifyOtpRequest,
)
from src.commune.schemas.property import BuildingRead, ComplaintRead, MaintenanceRequestRead
from src.commune.schemas.user import RoleUpdate, StatusUpdate, UserRead

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "OtpSentData",
    "OtpSentResponse",
    "RefreshResponse",
    "VerifyOtpRequest",
    # Property
    "BuildingRead",
    "ComplaintRead",
    "MaintenanceRequestRead",
    # User
    "RoleUpdate",
    "StatusUpdate",
    "UserRead",
]
