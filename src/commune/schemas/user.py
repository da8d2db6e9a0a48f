from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from src.commune.models.enums import PrincipalStatus, Role


class UserRead(BaseModel):
    id: int
    email: EmailStr
    role: Role
    status: PrincipalStatus
    email_verified: bool
    created_at: datetime
    last_login: datetime | None = None

    model_config = {"from_attributes": True}


class StatusUpdate(BaseModel):
    status: PrincipalStatus
    reason: str | None = Field(None, max_length=500)


class RoleUpdate(BaseModel):
    role: Role
    reason: str | None = Field(None, max_length=500)
