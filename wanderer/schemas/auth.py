import re
import uuid
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, TypeAdapter, ValidationError, model_validator

PHONE_PATTERN = re.compile(r"^\+63[0-9]{10}$")
MIN_PASSWORD_LENGTH = 6

_email_adapter = TypeAdapter(EmailStr)


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    full_name: str = Field(min_length=1, max_length=200)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: uuid.UUID
    email: str | None = None
    phone: str | None = None
    full_name: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    role: str
    onboarding_complete: bool = False

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    token: str
    user: UserResponse


class ContactMixin(BaseModel):
    """Contact plus its type; accepts `contactType` as well as `contact_type`."""

    contact: str
    contact_type: Literal["email", "phone"] = Field(alias="contactType")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def check_contact(self):
        self.contact = self.contact.strip()
        if self.contact_type == "phone":
            if not PHONE_PATTERN.match(self.contact):
                raise ValueError("Please enter a valid Philippine phone number (+63XXXXXXXXXX)")
        else:
            try:
                self.contact = str(_email_adapter.validate_python(self.contact)).lower()
            except ValidationError:
                raise ValueError("Please enter a valid email address")
        return self


class OtpSendRequest(ContactMixin):
    pass


class OtpSendResponse(BaseModel):
    success: bool
    message: str


class OtpSignupRequest(ContactMixin):
    otp_code: str = Field(alias="otpCode", min_length=6, max_length=6)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    full_name: str = Field(alias="fullName", min_length=1, max_length=200)


class OtpLoginRequest(ContactMixin):
    otp_code: str = Field(alias="otpCode", min_length=6, max_length=6)
