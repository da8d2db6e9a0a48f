"""Authentication endpoints - passwordless OTP login."""

from fastapi import APIRouter
from starlette.requests import Request

from src.commune.api.dependencies import (
    AuthServiceDep,
    BearerToken,
    CurrentPrincipal,
    OtpServiceDep,
    PrincipalRepo,
)
from src.commune.core.exceptions import NotFoundError
from src.commune.core.rate_limit import limiter
from src.commune.models.enums import OtpPurpose
from src.commune.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    OtpSentData,
    OtpSentResponse,
    RefreshResponse,
    VerifyOtpRequest,
)
from src.commune.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=OtpSentResponse,
    responses={
        200: {
            "description": "OTP sent",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "OTP sent to your email",
                        "data": {"email": "manager@example.com", "expires_in": 600},
                    }
                }
            },
        },
        403: {"description": "Account is inactive"},
        404: {"description": "No account for this email"},
    },
)
@limiter.limit("5/minute")
async def login(request: Request, data: LoginRequest, service: OtpServiceDep) -> OtpSentResponse:
    """Send a one-time login code to the account's email."""
    result = await service.issue(data.email, OtpPurpose.LOGIN)
    return OtpSentResponse(
        message="OTP sent to your email",
        data=OtpSentData(email=result.email, expires_in=result.expires_in_seconds),
    )


@router.post(
    "/resend-otp",
    response_model=OtpSentResponse,
    responses={
        403: {"description": "Account is inactive"},
        404: {"description": "No account for this email"},
        429: {"description": "A code was sent less than a minute ago"},
    },
)
@limiter.limit("5/minute")
async def resend_otp(
    request: Request, data: LoginRequest, service: OtpServiceDep
) -> OtpSentResponse:
    """Replace the current code with a new one, at most once per cooldown."""
    result = await service.issue(data.email, OtpPurpose.RESEND)
    return OtpSentResponse(
        message="OTP resent to your email",
        data=OtpSentData(email=result.email, expires_in=result.expires_in_seconds),
    )


@router.post(
    "/verify-otp",
    response_model=LoginResponse,
    responses={
        200: {
            "description": "Login successful",
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "user": {
                            "id": 12,
                            "email": "manager@example.com",
                            "role": "manager",
                            "status": "active",
                            "email_verified": True,
                            "created_at": "2024-01-15T10:30:00",
                            "last_login": "2024-03-02T08:12:44",
                        },
                    }
                }
            },
        },
        401: {"description": "Code expired, used, exhausted or wrong (see `reason`)"},
        403: {"description": "Account is inactive"},
        404: {"description": "No code was issued for this email"},
    },
)
@limiter.limit("10/minute")
async def verify_otp(
    request: Request, data: VerifyOtpRequest, service: AuthServiceDep
) -> LoginResponse:
    """Exchange a one-time code for a bearer token."""
    result = await service.login(data.email, data.otp)
    return LoginResponse(token=result.token, user=UserRead.model_validate(result.user))


@router.post(
    "/refresh",
    response_model=RefreshResponse,
    responses={401: {"description": "Invalid or expired token"}},
)
async def refresh(token: BearerToken, service: AuthServiceDep) -> RefreshResponse:
    """Re-mint the caller's token with a fresh expiry. Claims are unchanged."""
    return RefreshResponse(token=await service.refresh(token))


@router.post("/logout", response_model=MessageResponse)
async def logout(principal: CurrentPrincipal) -> MessageResponse:
    """Acknowledge logout. Tokens are stateless; the client discards its copy."""
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/me",
    response_model=UserRead,
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Account no longer exists"},
    },
)
async def me(principal: CurrentPrincipal, principal_repo: PrincipalRepo) -> UserRead:
    """Get the authenticated principal's current record."""
    user = await principal_repo.get_by_id(principal.principal_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserRead.model_validate(user)
