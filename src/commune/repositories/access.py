"""Ownership and tenancy lookups used by the permission resolver."""

from datetime import date

from sqlmodel import select

from src.commune.models.enums import AgreementStatus, BuildingStatus
from src.commune.models.property import (
    Building,
    Complaint,
    MaintenanceRequest,
    Room,
    Tenancy,
    Unit,
)
from src.commune.repositories.base import BaseRepository


class AccessRepository(BaseRepository[Building]):
    """Existence queries that answer "is X linked to Y".

    Tenancies reach their building through unit -> room -> building.
    ``today`` is passed in rather than read from the database clock so the
    same window applies to every query of a request.
    """

    model = Building

    def _active_tenancy_buildings(self, tenant_id: int, today: date):  # type: ignore[no-untyped-def]
        return (
            select(Room.building_id)
            .select_from(Tenancy)
            .join(Unit, Tenancy.unit_id == Unit.id)  # type: ignore[arg-type]
            .join(Room, Unit.room_id == Room.id)  # type: ignore[arg-type]
            .where(
                Tenancy.tenant_user_id == tenant_id,
                Tenancy.agreement_status == AgreementStatus.EXECUTED.value,
                Tenancy.start_date <= today,
                Tenancy.end_date >= today,  # type: ignore[operator]
            )
        )

    # --- building ---

    async def manager_owns_active_building(self, manager_id: int, building_id: int) -> bool:
        return await self._exists(
            select(Building.id).where(
                Building.id == building_id,
                Building.manager_id == manager_id,
                Building.status == BuildingStatus.ACTIVE.value,
            )
        )

    async def tenant_active_in_building(self, tenant_id: int, building_id: int, today: date) -> bool:
        return await self._exists(
            self._active_tenancy_buildings(tenant_id, today).where(Room.building_id == building_id)
        )

    # --- maintenance ---

    async def maintenance_in_managed_building(self, request_id: int, manager_id: int) -> bool:
        return await self._exists(
            select(MaintenanceRequest.id)
            .join(Room, MaintenanceRequest.room_id == Room.id)  # type: ignore[arg-type]
            .join(Building, Room.building_id == Building.id)  # type: ignore[arg-type]
            .where(MaintenanceRequest.id == request_id, Building.manager_id == manager_id)
        )

    async def maintenance_owned_by(self, request_id: int, tenant_id: int) -> bool:
        return await self._exists(
            select(MaintenanceRequest.id).where(
                MaintenanceRequest.id == request_id,
                MaintenanceRequest.tenant_user_id == tenant_id,
            )
        )

    # --- tenant ---

    async def tenant_in_managed_building(self, tenant_id: int, manager_id: int) -> bool:
        """Any executed tenancy, regardless of its date window."""
        return await self._exists(
            select(Tenancy.tenant_user_id)
            .join(Unit, Tenancy.unit_id == Unit.id)  # type: ignore[arg-type]
            .join(Room, Unit.room_id == Room.id)  # type: ignore[arg-type]
            .join(Building, Room.building_id == Building.id)  # type: ignore[arg-type]
            .where(
                Tenancy.tenant_user_id == tenant_id,
                Building.manager_id == manager_id,
                Tenancy.agreement_status == AgreementStatus.EXECUTED.value,
            )
        )

    # --- complaint ---

    async def complaint_in_managed_building(self, complaint_id: int, manager_id: int) -> bool:
        return await self._exists(
            select(Complaint.id)
            .join(Building, Complaint.building_id == Building.id)  # type: ignore[arg-type]
            .where(Complaint.id == complaint_id, Building.manager_id == manager_id)
        )

    async def complaint_owned_by(self, complaint_id: int, tenant_id: int) -> bool:
        return await self._exists(
            select(Complaint.id).where(
                Complaint.id == complaint_id,
                Complaint.tenant_user_id == tenant_id,
            )
        )

    # --- data scope ---

    async def managed_building_ids(self, manager_id: int) -> set[int]:
        result = await self.session.execute(
            select(Building.id).where(
                Building.manager_id == manager_id,
                Building.status == BuildingStatus.ACTIVE.value,
            )
        )
        return {row[0] for row in result.all()}

    async def active_tenancy_building_ids(self, tenant_id: int, today: date) -> set[int]:
        result = await self.session.execute(
            self._active_tenancy_buildings(tenant_id, today).distinct()
        )
        return {row[0] for row in result.all()}
