"""Base factory configuration for polyfactory."""

import secrets

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from src.commune.models.base import utc_now


def unique_suffix() -> str:
    """Short random suffix for unique columns."""
    return secrets.token_hex(4)


class BaseFactory(SQLAlchemyFactory):
    """Base factory with common configuration for all models.

    Primary keys are left to the database (autoincrement) unless a test
    passes ``id=`` explicitly. Foreign keys are always set by the test.
    """

    __is_base_factory__ = True
    __set_relationships__ = False
    __set_foreign_keys__ = False  # We set FK values explicitly


__all__ = ["BaseFactory", "unique_suffix", "utc_now"]
