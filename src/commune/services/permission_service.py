"""Resource-level authorization - ownership rules and building scope."""

from collections.abc import Callable, Collection
from datetime import date

from src.commune.core.exceptions import ForbiddenError
from src.commune.core.logging import get_logger
from src.commune.core.permissions import (
    AccessScope,
    BuildingScope,
    RestrictedTo,
    Unrestricted,
    has_blanket_access,
    has_unrestricted_data_scope,
)
from src.commune.core.security import PrincipalClaims
from src.commune.models.base import utc_today
from src.commune.models.enums import Operation, ResourceType, Role
from src.commune.repositories import AccessRepository

logger = get_logger(__name__)


class PermissionResolver:
    """Decides whether a scoped principal may touch one specific resource.

    Only managers and tenants have rules. Any other (role, resource type)
    pair, including resource types without rules, is denied. The operation
    is carried for auditing and does not affect the decision.
    """

    def __init__(self, access_repo: AccessRepository, today: Callable[[], date] = utc_today):
        self.access_repo = access_repo
        self.today = today

    async def permitted(
        self,
        principal: PrincipalClaims,
        resource_type: ResourceType,
        resource_id: int,
        operation: Operation,
    ) -> bool:
        match principal.role:
            case Role.MANAGER:
                return await self._manager_permitted(principal.principal_id, resource_type, resource_id)
            case Role.TENANT:
                return await self._tenant_permitted(principal.principal_id, resource_type, resource_id)
            case _:
                return False

    async def _manager_permitted(
        self, manager_id: int, resource_type: ResourceType, resource_id: int
    ) -> bool:
        repo = self.access_repo
        match resource_type:
            case ResourceType.BUILDING:
                return await repo.manager_owns_active_building(manager_id, resource_id)
            case ResourceType.MAINTENANCE:
                return await repo.maintenance_in_managed_building(resource_id, manager_id)
            case ResourceType.TENANT:
                return await repo.tenant_in_managed_building(resource_id, manager_id)
            case ResourceType.COMPLAINT:
                return await repo.complaint_in_managed_building(resource_id, manager_id)
            case _:
                return False

    async def _tenant_permitted(
        self, tenant_id: int, resource_type: ResourceType, resource_id: int
    ) -> bool:
        repo = self.access_repo
        match resource_type:
            case ResourceType.BUILDING:
                return await repo.tenant_active_in_building(tenant_id, resource_id, self.today())
            case ResourceType.MAINTENANCE:
                return await repo.maintenance_owned_by(resource_id, tenant_id)
            case ResourceType.TENANT:
                return resource_id == tenant_id
            case ResourceType.COMPLAINT:
                return await repo.complaint_owned_by(resource_id, tenant_id)
            case _:
                return False

    async def resolve_building_scope(self, principal: PrincipalClaims) -> BuildingScope:
        """Buildings visible to ``principal`` in list queries.

        Managers see active buildings they manage, tenants the buildings of
        their currently active tenancies. Both may resolve to an empty set.
        """
        if has_unrestricted_data_scope(principal.role):
            return Unrestricted()
        if principal.role is Role.MANAGER:
            ids = await self.access_repo.managed_building_ids(principal.principal_id)
        else:
            ids = await self.access_repo.active_tenancy_building_ids(
                principal.principal_id, self.today()
            )
        return RestrictedTo(frozenset(ids))


class AuthorizationService:
    """Runs the full authorization sequence for one request."""

    def __init__(self, resolver: PermissionResolver):
        self.resolver = resolver

    async def authorize(
        self,
        principal: PrincipalClaims,
        resource_type: ResourceType,
        operation: Operation,
        resource_id: int | None = None,
        roles: Collection[Role] | None = None,
    ) -> AccessScope:
        """Authorize ``principal`` and return the resolved scope.

        Steps: optional role restriction, blanket role policy, resolver check
        when a resource id is addressed, then building scope resolution.

        Raises:
            ForbiddenError: Role not allowed, or resolver denied the resource.
        """
        if roles is not None and principal.role not in roles:
            logger.warning(
                "Role not allowed",
                principal_id=principal.principal_id,
                role=principal.role.value,
                resource_type=resource_type.value,
            )
            raise ForbiddenError("Insufficient role permissions")

        if not has_blanket_access(principal.role, resource_type) and resource_id is not None:
            if not await self.resolver.permitted(principal, resource_type, resource_id, operation):
                logger.warning(
                    "Access denied",
                    principal_id=principal.principal_id,
                    role=principal.role.value,
                    resource_type=resource_type.value,
                    resource_id=resource_id,
                    operation=operation.value,
                )
                raise ForbiddenError("Access denied to this resource")

        buildings = await self.resolver.resolve_building_scope(principal)

        return AccessScope(
            principal=principal,
            resource_type=resource_type,
            operation=operation,
            resource_id=resource_id,
            buildings=buildings,
        )
