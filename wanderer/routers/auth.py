"""Auth router — email/password accounts and OTP signup/login."""

import logging
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from jose import jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.config import settings
from wanderer.database import get_db
from wanderer.models.user import User
from wanderer.schemas.auth import (
    AuthResponse,
    LoginRequest,
    OtpLoginRequest,
    OtpSendRequest,
    OtpSendResponse,
    OtpSignupRequest,
    RegisterRequest,
    UserResponse,
)
from wanderer.services.email_client import EmailDeliveryError
from wanderer.services.otp_service import OtpError, otp_service

logger = logging.getLogger(__name__)

router = APIRouter()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def create_access_token(user_id: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    payload = {"sub": user_id, "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def _contact_column(contact_type: str):
    return User.email if contact_type == "email" else User.phone


async def _find_by_contact(db: AsyncSession, contact: str, contact_type: str) -> User | None:
    result = await db.execute(select(User).where(_contact_column(contact_type) == contact))
    return result.scalar_one_or_none()


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(token=create_access_token(str(user.id)), user=UserResponse.model_validate(user))


@router.post("/register", status_code=201, response_model=AuthResponse)
async def register(req: RegisterRequest, db: AsyncSession = Depends(get_db)):
    email = req.email.lower()
    if await _find_by_contact(db, email, "email"):
        raise HTTPException(status_code=409, detail="Email already registered")

    user = User(
        email=email,
        password_hash=pwd_context.hash(req.password),
        full_name=req.full_name,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.info(f"User registered: {user.id}")
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
async def login(req: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await _find_by_contact(db, req.email.lower(), "email")

    if not user or not pwd_context.verify(req.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if not user.is_active:
        raise HTTPException(status_code=403, detail="Account is disabled")

    return _auth_response(user)


@router.post("/otp/send", response_model=OtpSendResponse)
async def send_otp(req: OtpSendRequest, db: AsyncSession = Depends(get_db)):
    """Issue a one-time code for the contact and deliver it."""
    try:
        await otp_service.issue(db, req.contact, req.contact_type)
        await db.commit()
    except EmailDeliveryError as e:
        await db.rollback()
        logger.error(f"OTP send failed: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
    except Exception as e:
        await db.rollback()
        logger.exception(f"OTP send failed unexpectedly: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})

    return OtpSendResponse(success=True, message="OTP sent successfully")


@router.post("/otp/verify-signup", status_code=201, response_model=AuthResponse)
async def verify_signup(req: OtpSignupRequest, db: AsyncSession = Depends(get_db)):
    """Verify the code, then create an account keyed on the verified contact."""
    try:
        await otp_service.verify(db, req.contact, req.otp_code)
    except OtpError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if await _find_by_contact(db, req.contact, req.contact_type):
        raise HTTPException(status_code=409, detail=f"An account with this {req.contact_type} already exists")

    user = User(
        email=req.contact if req.contact_type == "email" else None,
        phone=req.contact if req.contact_type == "phone" else None,
        password_hash=pwd_context.hash(req.password),
        full_name=req.full_name,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.info(f"User registered via OTP ({req.contact_type}): {user.id}")
    return _auth_response(user)


@router.post("/otp/login", response_model=AuthResponse)
async def otp_login(req: OtpLoginRequest, db: AsyncSession = Depends(get_db)):
    try:
        await otp_service.verify(db, req.contact, req.otp_code)
    except OtpError as e:
        raise HTTPException(status_code=400, detail=str(e))

    user = await _find_by_contact(db, req.contact, req.contact_type)
    if not user:
        raise HTTPException(status_code=401, detail="No account found for this contact")
    if not user.is_active:
        raise HTTPException(status_code=403, detail="Account is disabled")

    await db.commit()
    return _auth_response(user)
