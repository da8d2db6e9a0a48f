"""Repository layer - data access abstraction."""

from src.commune.repositories.access import AccessRepository
from src.commune.repositories.base import BaseRepository
from src.commune.repositories.otp import OtpRepository
from src.commune.repositories.principal import PrincipalRepository
from src.commune.repositories.property import (
    BuildingRepository,
    ComplaintRepository,
    MaintenanceRequestRepository,
)

__all__ = [
    "AccessRepository",
    "BaseRepository",
    "BuildingRepository",
    "ComplaintRepository",
    "MaintenanceRequestRepository",
    "OtpRepository",
    "PrincipalRepository",
]
