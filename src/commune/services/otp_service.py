"""One-time password service - issue and verify login codes."""

import asyncio
from dataclasses import dataclass
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from src.commune.core.config import get_settings
from src.commune.core.exceptions import (
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    UnauthorizedError,
    UnauthorizedReason,
)
from src.commune.core.logging import get_logger
from src.commune.core.notifications import OtpDelivery
from src.commune.core.security import PrincipalClaims, codes_match, generate_otp
from src.commune.models.base import utc_now
from src.commune.models.enums import OtpPurpose, Role
from src.commune.models.otp import OtpRecord
from src.commune.repositories import OtpRepository, PrincipalRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class OtpIssueResult:
    email: str
    expires_in_seconds: int
    delivered: bool


class OtpService:
    """Issues and verifies one-time login codes.

    A code is single-use, expires after ``otp_expire_minutes`` and allows at
    most ``otp_max_attempts`` wrong guesses. Records are always stored under
    the ``login`` purpose; the purpose passed to ``issue`` selects the resend
    cooldown and the email wording.
    """

    def __init__(
        self,
        principal_repo: PrincipalRepository,
        otp_repo: OtpRepository,
        session: AsyncSession,
        delivery: OtpDelivery,
    ):
        self.principal_repo = principal_repo
        self.otp_repo = otp_repo
        self.session = session
        self.delivery = delivery

    async def issue(self, email: str, purpose: OtpPurpose = OtpPurpose.LOGIN) -> OtpIssueResult:
        """Create a fresh code for ``email`` and hand it to the delivery channel.

        Raises:
            NotFoundError: No principal with this email.
            ForbiddenError: The principal is not active.
            RateLimitedError: Resend requested while a live code is younger
                than the cooldown.
        """
        settings = get_settings()

        try:
            # Locking the principal row serializes concurrent issues for one email
            user = await self.principal_repo.get_by_email(email, for_update=True)
            if user is None:
                raise NotFoundError("User not found. Please contact admin for account creation.")
            if not user.is_active:
                raise ForbiddenError("Account is inactive. Please contact administrator.")

            now = utc_now()
            if purpose is OtpPurpose.RESEND:
                live = await self.otp_repo.find_live(email, OtpPurpose.LOGIN, now)
                cooldown = timedelta(seconds=settings.otp_resend_cooldown_seconds)
                if live is not None and live.created_at > now - cooldown:
                    raise RateLimitedError(
                        "Please wait 1 minute before requesting another OTP"
                    )

            await self.otp_repo.delete_live(email, OtpPurpose.LOGIN)

            code = generate_otp(settings.otp_length)
            await self.otp_repo.insert(
                OtpRecord(
                    email=email,
                    code=code,
                    purpose=OtpPurpose.LOGIN.value,
                    created_at=now,
                    expires_at=now + timedelta(minutes=settings.otp_expire_minutes),
                )
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        # The record is committed; a delivery failure leaves the code valid.
        try:
            delivered = await asyncio.to_thread(self.delivery.send, email, code, purpose)
        except Exception as e:
            logger.error("OTP delivery raised", user_id=user.id, error=str(e))
            delivered = False

        if not delivered:
            logger.warning("OTP delivery failed", user_id=user.id, purpose=purpose.value)
        logger.info("OTP issued", user_id=user.id, purpose=purpose.value)

        return OtpIssueResult(
            email=email,
            expires_in_seconds=settings.otp_expire_minutes * 60,
            delivered=delivered,
        )

    async def verify(self, email: str, code: str) -> PrincipalClaims:
        """Consume ``code`` and return the principal's claims.

        Checks run in order existence, expiry, used, attempts, match so the
        caller sees the most specific failure.

        Raises:
            NotFoundError: No code was ever issued for this email.
            UnauthorizedError: reason ``expired``, ``used``,
                ``too_many_attempts`` or ``invalid_code``.
            ForbiddenError: The principal was deactivated after the code was issued.
        """
        settings = get_settings()

        try:
            record = await self.otp_repo.find_latest(email, OtpPurpose.LOGIN, for_update=True)
            if record is None:
                raise NotFoundError("No OTP found. Please request a new one.")

            if record.is_expired(utc_now()):
                raise UnauthorizedError(
                    "OTP has expired. Please request a new one.",
                    reason=UnauthorizedReason.EXPIRED,
                )

            if record.used:
                raise UnauthorizedError(
                    "OTP has already been used. Please request a new one.",
                    reason=UnauthorizedReason.USED,
                )

            if record.attempts >= settings.otp_max_attempts:
                raise UnauthorizedError(
                    "Too many failed attempts. Please request a new OTP.",
                    reason=UnauthorizedReason.TOO_MANY_ATTEMPTS,
                )

            if not codes_match(record.code, code):
                attempts = await self.otp_repo.increment_attempts(record.id)  # type: ignore[arg-type]
                await self.session.commit()
                logger.warning("OTP verification failed", otp_id=record.id, attempts=attempts)
                raise UnauthorizedError(
                    "Invalid OTP. Please try again.",
                    reason=UnauthorizedReason.INVALID_CODE,
                )

            if not await self.otp_repo.mark_used(record.id):  # type: ignore[arg-type]
                raise UnauthorizedError(
                    "OTP has already been used. Please request a new one.",
                    reason=UnauthorizedReason.USED,
                )

            user = await self.principal_repo.get_by_email(email)
            if user is None:
                raise NotFoundError("User not found")

            if not user.is_active:
                # Keep the code consumed
                await self.session.commit()
                raise ForbiddenError("Account is inactive. Please contact administrator.")

            await self.principal_repo.touch_last_login(user)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        return PrincipalClaims(principal_id=user.id, email=user.email, role=Role(user.role))  # type: ignore[arg-type]
