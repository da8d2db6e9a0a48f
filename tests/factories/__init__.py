"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, BuildingFactory, ...
"""

from tests.factories.base import BaseFactory, unique_suffix, utc_now
from tests.factories.otp import OtpRecordFactory
from tests.factories.property import (
    BuildingFactory,
    ComplaintFactory,
    MaintenanceRequestFactory,
    RoomFactory,
    TenancyFactory,
    UnitFactory,
)
from tests.factories.user import UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "unique_suffix",
    "utc_now",
    # Principals
    "UserFactory",
    # OTP
    "OtpRecordFactory",
    # Property
    "BuildingFactory",
    "ComplaintFactory",
    "MaintenanceRequestFactory",
    "RoomFactory",
    "TenancyFactory",
    "UnitFactory",
]
