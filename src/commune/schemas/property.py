from datetime import datetime

from pydantic import BaseModel


class BuildingRead(BaseModel):
    id: int
    name: str
    manager_id: int | None
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class MaintenanceRequestRead(BaseModel):
    id: int
    room_id: int
    unit_id: int | None
    tenant_user_id: int | None
    title: str
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ComplaintRead(BaseModel):
    id: int
    building_id: int
    tenant_user_id: int
    title: str
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}
