"""OTP service — issues, delivers and verifies one-time passcodes."""

import logging
import secrets
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.config import settings
from wanderer.models.otp import TempOtp
from wanderer.services.email_client import email_client

logger = logging.getLogger(__name__)

OTP_MIN = 100000
OTP_MAX = 999999


class OtpError(ValueError):
    pass


def generate_code() -> str:
    """Six-digit numeric code in [100000, 999999]."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def mask_contact(contact: str) -> str:
    if "@" in contact:
        name, _, domain = contact.partition("@")
        return f"{name[:2]}***@{domain}"
    return f"{contact[:4]}***{contact[-2:]}"


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive timestamps
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class OtpService:
    """Stores OTP rows in temp_otps and delivers them by email."""

    @property
    def ttl(self) -> timedelta:
        return timedelta(minutes=settings.otp_ttl_minutes)

    async def issue(self, db: AsyncSession, contact: str, contact_type: str) -> TempOtp:
        """Generate and store a code for the contact, then deliver it."""
        otp = TempOtp(contact=contact, otp_code=generate_code())
        db.add(otp)
        await db.flush()

        if contact_type == "email":
            await email_client.send_otp(contact, otp.otp_code)
        else:
            # No SMS provider is wired up; the code is stored for verification only.
            logger.warning(f"SMS delivery not configured — OTP for {mask_contact(contact)} stored only")

        logger.info(f"OTP issued for {mask_contact(contact)} via {contact_type}")
        return otp

    async def verify(self, db: AsyncSession, contact: str, code: str) -> TempOtp:
        """Check an unverified code for the contact and mark it verified."""
        result = await db.execute(
            select(TempOtp)
            .where(
                TempOtp.contact == contact,
                TempOtp.otp_code == code,
                TempOtp.verified == False,
            )
            .order_by(TempOtp.created_at.desc())
            .limit(1)
        )
        otp = result.scalar_one_or_none()
        if not otp:
            raise OtpError("Invalid or expired verification code. Please try again.")

        if datetime.now(timezone.utc) - _as_utc(otp.created_at) > self.ttl:
            raise OtpError("Verification code has expired. Please request a new one.")

        otp.verified = True
        await db.flush()
        return otp

    async def purge_expired(self, db: AsyncSession) -> int:
        """Delete verified codes and codes past their TTL."""
        cutoff = datetime.now(timezone.utc) - self.ttl
        result = await db.execute(
            delete(TempOtp)
            .where(or_(TempOtp.verified == True, TempOtp.created_at < cutoff))
            .execution_options(synchronize_session=False)
        )
        await db.commit()
        return result.rowcount or 0


otp_service = OtpService()
