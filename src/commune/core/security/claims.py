"""Identity claims carried by bearer tokens."""

from dataclasses import dataclass
from typing import Any

from src.commune.models.enums import Role


@dataclass(frozen=True)
class PrincipalClaims:
    """Who the bearer was at mint time.

    Claims are not re-checked against storage on verify, so they describe the
    principal as of token issuance, not necessarily as of now.
    """

    principal_id: int
    email: str
    role: Role

    def to_payload(self) -> dict[str, Any]:
        return {"sub": str(self.principal_id), "email": self.email, "role": self.role.value}

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "PrincipalClaims":
        """Build claims from a decoded token payload.

        Raises:
            ValueError: sub is not an integer id, email is missing, or role is unknown.
        """
        email = payload.get("email")
        if not isinstance(email, str) or not email:
            raise ValueError("Missing email claim")
        return cls(
            principal_id=int(payload.get("sub", "")),
            email=email,
            role=Role(payload.get("role")),
        )
