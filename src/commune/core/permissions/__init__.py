"""Role policy and access scope types."""

from src.commune.core.permissions.policy import (
    ADMIN_EXCLUDED_RESOURCES,
    SCOPED_ROLES,
    has_blanket_access,
    has_unrestricted_data_scope,
)
from src.commune.core.permissions.scope import (
    AccessScope,
    BuildingScope,
    RestrictedTo,
    Unrestricted,
)

__all__ = [
    # Policy
    "ADMIN_EXCLUDED_RESOURCES",
    "SCOPED_ROLES",
    "has_blanket_access",
    "has_unrestricted_data_scope",
    # Scope
    "AccessScope",
    "BuildingScope",
    "RestrictedTo",
    "Unrestricted",
]
