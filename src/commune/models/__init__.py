"""Model exports.

Import from here: `from src.commune.models import User, Building`
"""

from src.commune.models.enums import (
    AgreementStatus,
    BuildingStatus,
    Operation,
    OtpPurpose,
    PrincipalStatus,
    ResourceType,
    Role,
)
from src.commune.models.otp import OtpRecord
from src.commune.models.principal import User
from src.commune.models.property import (
    Building,
    Complaint,
    Floor,
    MaintenanceRequest,
    Room,
    Tenancy,
    Unit,
)

__all__ = [
    # Enums
    "AgreementStatus",
    "BuildingStatus",
    "Operation",
    "OtpPurpose",
    "PrincipalStatus",
    "ResourceType",
    "Role",
    # Models
    "Building",
    "Complaint",
    "Floor",
    "MaintenanceRequest",
    "OtpRecord",
    "Room",
    "Tenancy",
    "Unit",
    "User",
]
