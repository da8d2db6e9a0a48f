"""Property read endpoints guarded by resource-level authorization."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.commune.api.dependencies import (
    BuildingRepo,
    ComplaintRepo,
    MaintenanceRequestRepo,
    PrincipalRepo,
    authorize,
)
from src.commune.core.exceptions import NotFoundError
from src.commune.core.permissions import AccessScope
from src.commune.models.enums import ResourceType, Role
from src.commune.schemas.property import BuildingRead, ComplaintRead, MaintenanceRequestRead
from src.commune.schemas.user import UserRead

router = APIRouter(tags=["properties"])

_forbidden = {401: {"description": "Not authenticated"}, 403: {"description": "Access denied"}}


@router.get("/buildings", response_model=list[BuildingRead], responses=_forbidden)
async def list_buildings(
    scope: Annotated[AccessScope, Depends(authorize(ResourceType.BUILDING))],
    building_repo: BuildingRepo,
) -> list[BuildingRead]:
    """List buildings within the caller's data scope."""
    buildings = await building_repo.list_in_scope(scope.buildings)
    return [BuildingRead.model_validate(b) for b in buildings]


@router.get(
    "/buildings/{building_id}",
    response_model=BuildingRead,
    responses={**_forbidden, 404: {"description": "Building not found"}},
)
async def get_building(
    building_id: int,
    scope: Annotated[
        AccessScope,
        Depends(authorize(ResourceType.BUILDING, resource_id_param="building_id")),
    ],
    building_repo: BuildingRepo,
) -> BuildingRead:
    building = await building_repo.get_by_id(building_id)
    if building is None:
        raise NotFoundError("Building not found")
    return BuildingRead.model_validate(building)


@router.get(
    "/maintenance-requests/{request_id}",
    response_model=MaintenanceRequestRead,
    responses={**_forbidden, 404: {"description": "Maintenance request not found"}},
)
async def get_maintenance_request(
    request_id: int,
    scope: Annotated[
        AccessScope,
        Depends(authorize(ResourceType.MAINTENANCE, resource_id_param="request_id")),
    ],
    maintenance_repo: MaintenanceRequestRepo,
) -> MaintenanceRequestRead:
    maintenance_request = await maintenance_repo.get_by_id(request_id)
    if maintenance_request is None:
        raise NotFoundError("Maintenance request not found")
    return MaintenanceRequestRead.model_validate(maintenance_request)


@router.get(
    "/complaints/{complaint_id}",
    response_model=ComplaintRead,
    responses={**_forbidden, 404: {"description": "Complaint not found"}},
)
async def get_complaint(
    complaint_id: int,
    scope: Annotated[
        AccessScope,
        Depends(authorize(ResourceType.COMPLAINT, resource_id_param="complaint_id")),
    ],
    complaint_repo: ComplaintRepo,
) -> ComplaintRead:
    complaint = await complaint_repo.get_by_id(complaint_id)
    if complaint is None:
        raise NotFoundError("Complaint not found")
    return ComplaintRead.model_validate(complaint)


@router.get(
    "/tenants/{tenant_id}",
    response_model=UserRead,
    responses={**_forbidden, 404: {"description": "Tenant not found"}},
)
async def get_tenant(
    tenant_id: int,
    scope: Annotated[
        AccessScope,
        Depends(authorize(ResourceType.TENANT, resource_id_param="tenant_id")),
    ],
    principal_repo: PrincipalRepo,
) -> UserRead:
    """Get a tenant account. Managers see their buildings' tenants, tenants see themselves."""
    tenant = await principal_repo.get_by_id(tenant_id)
    if tenant is None or tenant.role != Role.TENANT.value:
        raise NotFoundError("Tenant not found")
    return UserRead.model_validate(tenant)
