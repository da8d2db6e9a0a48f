"""Property models - buildings, the unit hierarchy, tenancies and tickets.

Only the columns the access-control layer reads are modelled here.
"""

from datetime import date, datetime

from sqlmodel import Field, SQLModel

from src.commune.models.base import utc_now
from src.commune.models.enums import AgreementStatus, BuildingStatus


class Building(SQLModel, table=True):
    __tablename__ = "buildings"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    manager_id: int | None = Field(default=None, foreign_key="users.id", index=True)
    status: str = Field(default=BuildingStatus.ACTIVE.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Floor(SQLModel, table=True):
    __tablename__ = "floors"

    id: int | None = Field(default=None, primary_key=True)
    building_id: int = Field(foreign_key="buildings.id", index=True)
    floor_number: int


class Room(SQLModel, table=True):
    __tablename__ = "rooms"

    id: int | None = Field(default=None, primary_key=True)
    building_id: int = Field(foreign_key="buildings.id", index=True)
    floor_id: int | None = Field(default=None, foreign_key="floors.id")
    room_number: str = Field(max_length=20)


class Unit(SQLModel, table=True):
    __tablename__ = "units"

    id: int | None = Field(default=None, primary_key=True)
    room_id: int = Field(foreign_key="rooms.id", index=True)
    unit_number: str = Field(max_length=30, unique=True)


class Tenancy(SQLModel, table=True):
    """A tenant's agreement on a unit.

    Active means agreement_status is executed and today falls inside
    [start_date, end_date]. A tenancy without an end_date is never active.
    """

    __tablename__ = "tenancies"

    id: int | None = Field(default=None, primary_key=True)
    unit_id: int = Field(foreign_key="units.id", index=True)
    tenant_user_id: int = Field(foreign_key="users.id", index=True)
    start_date: date
    end_date: date | None = Field(default=None)
    agreement_status: str = Field(default=AgreementStatus.PENDING.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)

    def is_active_on(self, day: date) -> bool:
        return (
            self.agreement_status == AgreementStatus.EXECUTED.value
            and self.end_date is not None
            and self.start_date <= day <= self.end_date
        )


class MaintenanceRequest(SQLModel, table=True):
    __tablename__ = "maintenance_requests"

    id: int | None = Field(default=None, primary_key=True)
    room_id: int = Field(foreign_key="rooms.id", index=True)
    unit_id: int | None = Field(default=None, foreign_key="units.id")
    tenant_user_id: int | None = Field(default=None, foreign_key="users.id", index=True)
    title: str = Field(max_length=200)
    status: str = Field(default="pending", max_length=20)
    created_at: datetime = Field(default_factory=utc_now)


class Complaint(SQLModel, table=True):
    __tablename__ = "complaints"

    id: int | None = Field(default=None, primary_key=True)
    tenant_user_id: int = Field(foreign_key="users.id", index=True)
    building_id: int = Field(foreign_key="buildings.id", index=True)
    title: str = Field(max_length=200)
    status: str = Field(default="submitted", max_length=20)
    created_at: datetime = Field(default_factory=utc_now)
