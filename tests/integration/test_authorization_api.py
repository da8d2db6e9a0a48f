"""Resource-scoped authorization through the HTTP surface."""

from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.commune.models.base import utc_today
from src.commune.models.enums import PrincipalStatus, Role
from tests.factories import BuildingFactory, ComplaintFactory, MaintenanceRequestFactory
from tests.helpers import create_tenancy

pytestmark = [pytest.mark.asyncio, pytest.mark.integration]


@pytest.fixture
async def estate(db_session: AsyncSession, create_user) -> dict:
    """Two managers with one building each and a tenant living in the first."""
    super_admin = await create_user(role=Role.SUPER_ADMIN.value)
    admin = await create_user(role=Role.ADMIN.value)
    manager = await create_user(role=Role.MANAGER.value)
    other_manager = await create_user(role=Role.MANAGER.value)
    idle_manager = await create_user(role=Role.MANAGER.value)
    tenant = await create_user(role=Role.TENANT.value)
    neighbour = await create_user(role=Role.TENANT.value)

    b1 = BuildingFactory.build(manager_id=manager.id)
    b2 = BuildingFactory.build(manager_id=other_manager.id)
    db_session.add_all([b1, b2])
    await db_session.flush()

    room1, _, _ = await create_tenancy(db_session, b1, tenant.id)
    room2, _, _ = await create_tenancy(db_session, b2, neighbour.id)
    ticket1 = MaintenanceRequestFactory.build(room_id=room1.id, tenant_user_id=tenant.id)
    ticket2 = MaintenanceRequestFactory.build(room_id=room2.id, tenant_user_id=neighbour.id)
    complaint1 = ComplaintFactory.build(building_id=b1.id, tenant_user_id=tenant.id)
    complaint2 = ComplaintFactory.build(building_id=b2.id, tenant_user_id=neighbour.id)
    db_session.add_all([ticket1, ticket2, complaint1, complaint2])
    await db_session.commit()

    return {
        "super_admin": super_admin,
        "admin": admin,
        "manager": manager,
        "other_manager": other_manager,
        "idle_manager": idle_manager,
        "tenant": tenant,
        "neighbour": neighbour,
        "b1": b1,
        "b2": b2,
        "ticket1": ticket1,
        "ticket2": ticket2,
        "complaint1": complaint1,
        "complaint2": complaint2,
    }


class TestBuildingList:
    async def test_admin_sees_every_building(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.get("/api/v1/buildings", headers=auth_headers(estate["admin"]))

        assert response.status_code == 200
        assert {b["id"] for b in response.json()} == {estate["b1"].id, estate["b2"].id}

    async def test_manager_sees_managed_buildings(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.get("/api/v1/buildings", headers=auth_headers(estate["manager"]))

        assert [b["id"] for b in response.json()] == [estate["b1"].id]

    async def test_manager_without_buildings_sees_nothing(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.get(
            "/api/v1/buildings", headers=auth_headers(estate["idle_manager"])
        )

        assert response.status_code == 200
        assert response.json() == []

    async def test_tenant_sees_building_of_active_tenancy(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.get("/api/v1/buildings", headers=auth_headers(estate["tenant"]))

        assert [b["id"] for b in response.json()] == [estate["b1"].id]


class TestResourceRules:
    @pytest.mark.parametrize(
        ("who", "path", "expected"),
        [
            ("manager", "/api/v1/buildings/{b1}", 200),
            ("manager", "/api/v1/buildings/{b2}", 403),
            ("manager", "/api/v1/maintenance-requests/{ticket1}", 200),
            ("manager", "/api/v1/maintenance-requests/{ticket2}", 403),
            ("manager", "/api/v1/complaints/{complaint1}", 200),
            ("manager", "/api/v1/complaints/{complaint2}", 403),
            ("manager", "/api/v1/tenants/{tenant}", 200),
            ("manager", "/api/v1/tenants/{neighbour}", 403),
            ("tenant", "/api/v1/buildings/{b1}", 200),
            ("tenant", "/api/v1/buildings/{b2}", 403),
            ("tenant", "/api/v1/maintenance-requests/{ticket1}", 200),
            ("tenant", "/api/v1/maintenance-requests/{ticket2}", 403),
            ("tenant", "/api/v1/complaints/{complaint1}", 200),
            ("tenant", "/api/v1/complaints/{complaint2}", 403),
            ("tenant", "/api/v1/tenants/{tenant}", 200),
            ("tenant", "/api/v1/tenants/{neighbour}", 403),
            ("admin", "/api/v1/buildings/{b2}", 200),
            ("admin", "/api/v1/complaints/{complaint2}", 200),
            ("super_admin", "/api/v1/maintenance-requests/{ticket2}", 200),
        ],
    )
    async def test_access(
        self,
        client: AsyncClient,
        estate: dict,
        auth_headers,
        who: str,
        path: str,
        expected: int,
    ) -> None:
        ids = {key: getattr(value, "id", None) for key, value in estate.items()}

        response = await client.get(path.format(**ids), headers=auth_headers(estate[who]))

        assert response.status_code == expected, response.json()

    async def test_admin_gets_404_for_missing_building(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.get(
            "/api/v1/buildings/999999", headers=auth_headers(estate["admin"])
        )

        assert response.status_code == 404

    async def test_tenant_loses_access_when_tenancy_ends(
        self, client: AsyncClient, estate: dict, auth_headers, db_session: AsyncSession
    ) -> None:
        late_tenant = estate["neighbour"]
        await create_tenancy(
            db_session,
            estate["b1"],
            late_tenant.id,
            start=utc_today() - timedelta(days=365),
            end=utc_today() - timedelta(days=1),
        )
        await db_session.commit()

        response = await client.get(
            f"/api/v1/buildings/{estate['b1'].id}", headers=auth_headers(late_tenant)
        )

        assert response.status_code == 403


class TestUserManagement:
    async def test_super_admin_changes_status(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.put(
            f"/api/v1/users/{estate['manager'].id}/status",
            json={"status": "suspended", "reason": "Left the company"},
            headers=auth_headers(estate["super_admin"]),
        )

        assert response.status_code == 200
        assert response.json()["status"] == PrincipalStatus.SUSPENDED.value

    async def test_super_admin_changes_role(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.put(
            f"/api/v1/users/{estate['tenant'].id}/role",
            json={"role": "manager"},
            headers=auth_headers(estate["super_admin"]),
        )

        assert response.status_code == 200
        assert response.json()["role"] == Role.MANAGER.value

    async def test_admin_is_denied_user_management(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.put(
            f"/api/v1/users/{estate['manager'].id}/status",
            json={"status": "inactive"},
            headers=auth_headers(estate["admin"]),
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied to this resource"

    async def test_manager_fails_role_restriction(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.put(
            f"/api/v1/users/{estate['tenant'].id}/status",
            json={"status": "inactive"},
            headers=auth_headers(estate["manager"]),
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Insufficient role permissions"

    async def test_cannot_change_own_status(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        super_admin = estate["super_admin"]

        response = await client.put(
            f"/api/v1/users/{super_admin.id}/status",
            json={"status": "inactive"},
            headers=auth_headers(super_admin),
        )

        assert response.status_code == 403

    async def test_unknown_user_is_404(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.put(
            "/api/v1/users/999999/role",
            json={"role": "admin"},
            headers=auth_headers(estate["super_admin"]),
        )

        assert response.status_code == 404

    async def test_invalid_status_value_is_400(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        response = await client.put(
            f"/api/v1/users/{estate['manager'].id}/status",
            json={"status": "banished"},
            headers=auth_headers(estate["super_admin"]),
        )

        assert response.status_code == 400

    async def test_role_change_does_not_touch_existing_tokens(
        self, client: AsyncClient, estate: dict, auth_headers
    ) -> None:
        tenant = estate["tenant"]
        tenant_headers = auth_headers(tenant)

        await client.put(
            f"/api/v1/users/{tenant.id}/role",
            json={"role": "admin"},
            headers=auth_headers(estate["super_admin"]),
        )
        response = await client.get(
            f"/api/v1/buildings/{estate['b2'].id}", headers=tenant_headers
        )

        assert response.status_code == 403
