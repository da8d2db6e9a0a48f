"""User management endpoints (super admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.commune.api.dependencies import UserServiceDep, authorize
from src.commune.core.logging import get_logger
from src.commune.core.permissions import AccessScope
from src.commune.models.enums import Operation, ResourceType, Role
from src.commune.schemas.user import RoleUpdate, StatusUpdate, UserRead

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

ManageUsers = Annotated[
    AccessScope,
    Depends(
        authorize(
            ResourceType.USER_MANAGEMENT,
            Operation.WRITE,
            resource_id_param="user_id",
            roles=(Role.SUPER_ADMIN, Role.ADMIN),
        )
    ),
]


@router.put(
    "/{user_id}/status",
    response_model=UserRead,
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Not a super admin, or changing own status"},
        404: {"description": "User not found"},
    },
)
async def update_user_status(
    user_id: int, data: StatusUpdate, scope: ManageUsers, service: UserServiceDep
) -> UserRead:
    """Activate, deactivate or suspend a user."""
    user = await service.update_status(scope.principal, user_id, data.status)
    if data.reason:
        logger.info("Status change reason", user_id=user_id, reason=data.reason)
    return UserRead.model_validate(user)


@router.put(
    "/{user_id}/role",
    response_model=UserRead,
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Not a super admin, or changing own role"},
        404: {"description": "User not found"},
    },
)
async def update_user_role(
    user_id: int, data: RoleUpdate, scope: ManageUsers, service: UserServiceDep
) -> UserRead:
    """Change a user's role. Tokens already issued keep the old role until they expire."""
    user = await service.update_role(scope.principal, user_id, data.role)
    if data.reason:
        logger.info("Role change reason", user_id=user_id, reason=data.reason)
    return UserRead.model_validate(user)
