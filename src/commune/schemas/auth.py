from pydantic import BaseModel, EmailStr, Field, field_validator

from src.commune.core.config import OTP_MAX_LENGTH, get_settings
from src.commune.schemas.user import UserRead


class LoginRequest(BaseModel):
    """Request a login code for an existing account."""

    email: EmailStr


class OtpSentData(BaseModel):
    email: EmailStr
    expires_in: int


class OtpSentResponse(BaseModel):
    success: bool = True
    message: str
    data: OtpSentData


class VerifyOtpRequest(BaseModel):
    email: EmailStr
    otp: str = Field(pattern=r"^\d+$", max_length=OTP_MAX_LENGTH, examples=["482913"])

    @field_validator("otp")
    @classmethod
    def validate_otp_length(cls, v: str) -> str:
        length = get_settings().otp_length
        if len(v) != length:
            raise ValueError(f"OTP must be exactly {length} digits")
        return v


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserRead


class RefreshResponse(BaseModel):
    token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    success: bool = True
    message: str
