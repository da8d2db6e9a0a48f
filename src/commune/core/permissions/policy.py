"""Role policy - blanket access decided from the role alone.

Evaluated before any resource-specific check. Roles without blanket access
must pass the permission resolver for every resource-scoped request.
"""

from typing import assert_never

from src.commune.models.enums import ResourceType, Role

# Resources an admin may not act on without further checks.
ADMIN_EXCLUDED_RESOURCES = frozenset({ResourceType.USER_MANAGEMENT})

# Roles whose rights are scoped to specific buildings/tenancies.
SCOPED_ROLES = frozenset({Role.MANAGER, Role.TENANT})


def has_blanket_access(role: Role, resource_type: ResourceType) -> bool:
    """Return True if ``role`` may perform any operation on ``resource_type``."""
    match role:
        case Role.SUPER_ADMIN:
            return True
        case Role.ADMIN:
            return resource_type not in ADMIN_EXCLUDED_RESOURCES
        case Role.MANAGER | Role.TENANT:
            return False
        case _:
            assert_never(role)


def has_unrestricted_data_scope(role: Role) -> bool:
    """Super admins and admins see every building in list queries."""
    return role not in SCOPED_ROLES
