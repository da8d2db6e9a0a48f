"""Test helpers for common data creation patterns."""

from datetime import date, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from src.commune.core.notifications import OtpDelivery
from src.commune.models.base import utc_today
from src.commune.models.enums import AgreementStatus, OtpPurpose
from src.commune.models.property import Building, Room, Tenancy, Unit
from tests.factories import RoomFactory, TenancyFactory, UnitFactory


class RecordingDelivery(OtpDelivery):
    """OTP delivery that keeps every code it is handed."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.sent: list[tuple[str, str, OtpPurpose]] = []

    def send(self, destination: str, code: str, purpose: OtpPurpose) -> bool:
        self.sent.append((destination, code, purpose))
        return self.succeed

    @property
    def last_code(self) -> str:
        return self.sent[-1][1]


async def create_tenancy(
    session: AsyncSession,
    building: Building,
    tenant_id: int,
    *,
    start: date | None = None,
    end: date | None = None,
    status: AgreementStatus = AgreementStatus.EXECUTED,
    unit_number: str | None = None,
) -> tuple[Room, Unit, Tenancy]:
    """Create room -> unit -> tenancy inside ``building``.

    Defaults to an executed tenancy covering today.
    """
    today = utc_today()
    room = RoomFactory.build(building_id=building.id)
    session.add(room)
    await session.flush()

    unit_kwargs = {"room_id": room.id}
    if unit_number is not None:
        unit_kwargs["unit_number"] = unit_number
    unit = UnitFactory.build(**unit_kwargs)
    session.add(unit)
    await session.flush()

    tenancy = TenancyFactory.build(
        unit_id=unit.id,
        tenant_user_id=tenant_id,
        start_date=start or today - timedelta(days=30),
        end_date=end if end is not None else today + timedelta(days=335),
        agreement_status=status.value,
    )
    session.add(tenancy)
    await session.flush()
    return room, unit, tenancy
