from sqlalchemy.ext.asyncio import AsyncSession

from src.commune.core.exceptions import ForbiddenError, NotFoundError
from src.commune.core.logging import get_logger
from src.commune.core.security import PrincipalClaims
from src.commune.models.base import utc_now
from src.commune.models.enums import PrincipalStatus, Role
from src.commune.models.principal import User
from src.commune.repositories import PrincipalRepository

logger = get_logger(__name__)


class UserService:
    """User management service."""

    def __init__(self, principal_repo: PrincipalRepository, session: AsyncSession):
        self.principal_repo = principal_repo
        self.session = session

    async def _get_other_user(self, actor: PrincipalClaims, user_id: int, what: str) -> User:
        user = await self.principal_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        if user.id == actor.principal_id:
            raise ForbiddenError(f"Cannot change your own {what}")
        return user

    async def update_status(
        self, actor: PrincipalClaims, user_id: int, status: PrincipalStatus
    ) -> User:
        """Activate, deactivate or suspend another user."""
        try:
            user = await self._get_other_user(actor, user_id, "status")
            previous = user.status
            user.status = status.value
            user.updated_at = utc_now()
            self.principal_repo.add(user)
            await self.session.commit()
            await self.session.refresh(user)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "User status changed",
            user_id=user_id,
            changed_by=actor.principal_id,
            previous=previous,
            status=status.value,
        )
        return user

    async def update_role(self, actor: PrincipalClaims, user_id: int, role: Role) -> User:
        """Change another user's role. Existing tokens keep the old role until expiry."""
        try:
            user = await self._get_other_user(actor, user_id, "role")
            previous = user.role
            user.role = role.value
            user.updated_at = utc_now()
            self.principal_repo.add(user)
            await self.session.commit()
            await self.session.refresh(user)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "User role changed",
            user_id=user_id,
            changed_by=actor.principal_id,
            previous=previous,
            role=role.value,
        )
        return user
