"""Repositories for property resources read behind the authorization layer."""

from sqlmodel import col, select

from src.commune.core.permissions.scope import BuildingScope, RestrictedTo, Unrestricted
from src.commune.models.property import Building, Complaint, MaintenanceRequest
from src.commune.repositories.base import BaseRepository


class BuildingRepository(BaseRepository[Building]):
    model = Building

    async def list_in_scope(self, scope: BuildingScope) -> list[Building]:
        """List buildings visible within ``scope``.

        An empty restriction returns immediately; it is never turned into an
        unfiltered query.
        """
        query = select(Building).order_by(col(Building.id))
        match scope:
            case Unrestricted():
                pass
            case RestrictedTo(building_ids=ids) if not ids:
                return []
            case RestrictedTo(building_ids=ids):
                query = query.where(col(Building.id).in_(sorted(ids)))
        result = await self.session.execute(query)
        return list(result.scalars().all())


class MaintenanceRequestRepository(BaseRepository[MaintenanceRequest]):
    model = MaintenanceRequest


class ComplaintRepository(BaseRepository[Complaint]):
    model = Complaint
