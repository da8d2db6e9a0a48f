"""Authorization dependency - guards a route by resource type and ownership."""

from collections.abc import Callable, Collection, Coroutine
from typing import Any

from fastapi import Request

from src.commune.api.dependencies.auth import CurrentPrincipal
from src.commune.api.dependencies.services import AuthorizationServiceDep
from src.commune.core.exceptions import ValidationError
from src.commune.core.permissions import AccessScope
from src.commune.models.enums import Operation, ResourceType, Role


def _resource_id_from(request: Request, param: str) -> int | None:
    raw = request.path_params.get(param, request.query_params.get(param))
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {param}") from e


def authorize(
    resource_type: ResourceType,
    operation: Operation = Operation.READ,
    *,
    resource_id_param: str | None = None,
    roles: Collection[Role] | None = None,
) -> Callable[..., Coroutine[Any, Any, AccessScope]]:
    """Build a dependency that authorizes the caller for ``resource_type``.

    The resolved ``AccessScope`` is returned and also stored on
    ``request.state.access_scope`` for handlers that need the building scope.

    Usage:
        @router.get("/buildings/{building_id}")
        async def get_building(
            scope: Annotated[
                AccessScope,
                Depends(authorize(ResourceType.BUILDING, resource_id_param="building_id")),
            ],
        ): ...
    """
    allowed = frozenset(roles) if roles is not None else None

    async def dependency(
        request: Request,
        principal: CurrentPrincipal,
        authorization_service: AuthorizationServiceDep,
    ) -> AccessScope:
        resource_id = (
            _resource_id_from(request, resource_id_param) if resource_id_param else None
        )
        scope = await authorization_service.authorize(
            principal,
            resource_type,
            operation,
            resource_id=resource_id,
            roles=allowed,
        )
        request.state.access_scope = scope
        return scope

    return dependency
