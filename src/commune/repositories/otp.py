"""Repository for OtpRecord entity."""

from datetime import datetime

from sqlalchemy import delete, update
from sqlmodel import col, select

from src.commune.models.enums import OtpPurpose
from src.commune.models.otp import OtpRecord
from src.commune.repositories.base import BaseRepository


class OtpRepository(BaseRepository[OtpRecord]):
    """Repository for one-time codes.

    Read-then-write sequences are made safe by row locks (``for_update``) and
    by conditional single-statement updates.
    """

    model = OtpRecord

    async def delete_live(self, email: str, purpose: OtpPurpose) -> int:
        """Delete every record for (email, purpose), the live one included."""
        result = await self.session.execute(
            delete(OtpRecord).where(
                OtpRecord.email == email,  # type: ignore[arg-type]
                OtpRecord.purpose == purpose.value,  # type: ignore[arg-type]
            )
        )
        return result.rowcount or 0  # type: ignore[attr-defined]

    async def insert(self, record: OtpRecord) -> OtpRecord:
        """Add a new record and flush to obtain its id."""
        self.session.add(record)
        await self.session.flush()
        return record

    async def find_latest(
        self, email: str, purpose: OtpPurpose, for_update: bool = False
    ) -> OtpRecord | None:
        """Get the most recent record for (email, purpose), whatever its state.

        Args:
            for_update: Lock the row until the transaction ends so a concurrent
                verify cannot read the same attempt count.
        """
        query = (
            select(OtpRecord)
            .where(OtpRecord.email == email, OtpRecord.purpose == purpose.value)
            .order_by(col(OtpRecord.created_at).desc(), col(OtpRecord.id).desc())
            .limit(1)
            .execution_options(populate_existing=True)
        )
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_live(self, email: str, purpose: OtpPurpose, now: datetime) -> OtpRecord | None:
        """Get the unused, unexpired record for (email, purpose), if any."""
        result = await self.session.execute(
            select(OtpRecord)
            .where(
                OtpRecord.email == email,
                OtpRecord.purpose == purpose.value,
                OtpRecord.used == False,  # noqa: E712
                OtpRecord.expires_at >= now,
            )
            .order_by(col(OtpRecord.created_at).desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def increment_attempts(self, id: int) -> int:
        """Atomically add one failed attempt and return the new count."""
        result = await self.session.execute(
            update(OtpRecord)
            .where(OtpRecord.id == id)  # type: ignore[arg-type]
            .values(attempts=OtpRecord.attempts + 1)
            .returning(OtpRecord.attempts)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one()

    async def mark_used(self, id: int) -> bool:
        """Flip ``used`` from False to True.

        Returns False if another transaction consumed the code first.
        """
        result = await self.session.execute(
            update(OtpRecord)
            .where(OtpRecord.id == id, OtpRecord.used == False)  # type: ignore[arg-type]  # noqa: E712
            .values(used=True)
            .returning(OtpRecord.id)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one_or_none() is not None
