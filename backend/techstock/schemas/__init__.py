"""Pydantic schemas for API requests and responses."""

from techstock.schemas.auth import (
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginResponse,
    ResetPasswordRequest,
    TokenClaims,
    UserLogin,
    UserRegister,
)
from techstock.schemas.common import ErrorDetail, ErrorResponse, MessageResponse
from techstock.schemas.contact import ContactMessage
from techstock.schemas.supplier import SupplierCreate, SupplierCreated, SupplierRead

__all__ = [
    "ContactMessage",
    "ErrorDetail",
    "ErrorResponse",
    "ForgotPasswordRequest",
    "ForgotPasswordResponse",
    "LoginResponse",
    "MessageResponse",
    "ResetPasswordRequest",
    "SupplierCreate",
    "SupplierCreated",
    "SupplierRead",
    "TokenClaims",
    "UserLogin",
    "UserRegister",
]
