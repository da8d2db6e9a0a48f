"""Principal factories for test data generation."""

from polyfactory import Use

from src.commune.models.enums import PrincipalStatus, Role
from src.commune.models.principal import User
from tests.factories.base import BaseFactory, unique_suffix, utc_now


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = None
    email = Use(lambda: f"user_{unique_suffix()}@example.com")
    role = Role.TENANT.value
    status = PrincipalStatus.ACTIVE.value
    email_verified = True
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
    last_login = None

    @classmethod
    def super_admin(cls, **kwargs):
        return cls.build(role=Role.SUPER_ADMIN.value, **kwargs)

    @classmethod
    def admin(cls, **kwargs):
        return cls.build(role=Role.ADMIN.value, **kwargs)

    @classmethod
    def manager(cls, **kwargs):
        return cls.build(role=Role.MANAGER.value, **kwargs)

    @classmethod
    def tenant(cls, **kwargs):
        return cls.build(role=Role.TENANT.value, **kwargs)

    @classmethod
    def inactive(cls, **kwargs):
        """Create a deactivated principal."""
        return cls.build(status=PrincipalStatus.INACTIVE.value, **kwargs)
