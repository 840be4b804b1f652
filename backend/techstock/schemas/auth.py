"""Schemas for authentication endpoints."""

from pydantic import BaseModel, EmailStr, Field, field_validator


def _normalize_email(v: str) -> str:
    """Emails are stored and looked up trimmed and lower-cased."""
    return v.strip().lower()


# bcrypt refuses input longer than this many bytes
MAX_PASSWORD_BYTES = 72


def _validate_password_bytes(v: str) -> str:
    if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded"
        )
    return v


class UserRegister(BaseModel):
    """Schema for user registration."""

    email: EmailStr
    password: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=32)
    city: str | None = Field(None, max_length=100)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _validate_password_bytes(v)


class UserLogin(BaseModel):
    """Schema for user login."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class LoginResponse(BaseModel):
    """Schema for login response."""

    message: str
    token: str
    role: str


class TokenClaims(BaseModel):
    """Identity carried by a verified bearer token."""

    user_id: int
    role: str
    username: str | None = None


class ForgotPasswordRequest(BaseModel):
    """Schema for requesting password reset."""

    email: EmailStr

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class ForgotPasswordResponse(BaseModel):
    """Schema for forgot-password response.

    ``token`` is only present when reset tokens are explicitly exposed for
    development; ``error`` carries a diagnostic note when email delivery was
    degraded.
    """

    message: str
    token: str | None = None
    error: str | None = None


class ResetPasswordRequest(BaseModel):
    """Schema for resetting password with the token from the reset link."""

    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _validate_password_bytes(v)
