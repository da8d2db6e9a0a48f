"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.commune.api.dependencies.db import DBSession
from src.commune.repositories import (
    AccessRepository,
    BuildingRepository,
    ComplaintRepository,
    MaintenanceRequestRepository,
    OtpRepository,
    PrincipalRepository,
)


def get_principal_repository(session: DBSession) -> PrincipalRepository:
    return PrincipalRepository(session)


def get_otp_repository(session: DBSession) -> OtpRepository:
    return OtpRepository(session)


def get_access_repository(session: DBSession) -> AccessRepository:
    return AccessRepository(session)


def get_building_repository(session: DBSession) -> BuildingRepository:
    return BuildingRepository(session)


def get_maintenance_request_repository(session: DBSession) -> MaintenanceRequestRepository:
    return MaintenanceRequestRepository(session)


def get_complaint_repository(session: DBSession) -> ComplaintRepository:
    return ComplaintRepository(session)


PrincipalRepo = Annotated[PrincipalRepository, Depends(get_principal_repository)]
OtpRepo = Annotated[OtpRepository, Depends(get_otp_repository)]
AccessRepo = Annotated[AccessRepository, Depends(get_access_repository)]
BuildingRepo = Annotated[BuildingRepository, Depends(get_building_repository)]
MaintenanceRequestRepo = Annotated[
    MaintenanceRequestRepository, Depends(get_maintenance_request_repository)
]
ComplaintRepo = Annotated[ComplaintRepository, Depends(get_complaint_repository)]
