"""Principal (user account) model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.commune.models.base import utc_now
from src.commune.models.enums import PrincipalStatus, Role


class User(SQLModel, table=True):
    """An account that can authenticate. Provisioned externally, never deleted."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    role: str = Field(default=Role.TENANT.value, max_length=20)
    status: str = Field(default=PrincipalStatus.ACTIVE.value, max_length=20)
    email_verified: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    last_login: datetime | None = Field(default=None)

    @property
    def is_active(self) -> bool:
        return self.status == PrincipalStatus.ACTIVE.value
