"""Resolved access scope attached to each authorized request."""

from dataclasses import dataclass

from src.commune.core.security.claims import PrincipalClaims
from src.commune.models.enums import Operation, ResourceType


@dataclass(frozen=True)
class Unrestricted:
    """Every building is visible."""


@dataclass(frozen=True)
class RestrictedTo:
    """Only the listed buildings are visible. May be empty."""

    building_ids: frozenset[int]

    @property
    def is_empty(self) -> bool:
        return not self.building_ids


BuildingScope = Unrestricted | RestrictedTo


@dataclass(frozen=True)
class AccessScope:
    """Outcome of authorization for one request.

    Downstream handlers read this instead of re-deriving access.
    """

    principal: PrincipalClaims
    resource_type: ResourceType
    operation: Operation
    resource_id: int | None
    buildings: BuildingScope

    @property
    def accessible_building_ids(self) -> list[int] | None:
        """Legacy view: None means unrestricted, a list (possibly empty) restricts."""
        if isinstance(self.buildings, Unrestricted):
            return None
        return sorted(self.buildings.building_ids)
