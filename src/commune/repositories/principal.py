"""Repository for User (principal) entity."""

from sqlmodel import select

from src.commune.models.base import utc_now
from src.commune.models.principal import User
from src.commune.repositories.base import BaseRepository


class PrincipalRepository(BaseRepository[User]):
    """Repository for principals."""

    model = User

    async def get_by_email(self, email: str, for_update: bool = False) -> User | None:
        """Get principal by email address, optionally locking the row."""
        query = select(User).where(User.email == email)
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def touch_last_login(self, user: User) -> User:
        """Record a successful login."""
        user.last_login = utc_now()
        self.session.add(user)
        await self.session.flush()
        return user
