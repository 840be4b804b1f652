"""Authentication router."""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from techstock.config import settings
from techstock.database import get_db
from techstock.exceptions import EmailAuthenticationError
from techstock.rate_limiter import limiter
from techstock.schemas.auth import (
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginResponse,
    ResetPasswordRequest,
    UserLogin,
    UserRegister,
)
from techstock.schemas.common import MessageResponse
from techstock.services.account_service import AccountService
from techstock.services.email_service import EmailService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=MessageResponse)
def register(data: UserRegister, db: Session = Depends(get_db)) -> dict:
    """Register a new user."""
    AccountService(db).register(
        email=data.email,
        password=data.password,
        name=data.name,
        phone=data.phone,
        city=data.city,
    )
    return {"message": "User registered successfully"}


@router.post("/login", response_model=LoginResponse)
@limiter.limit("5/minute")
def login(request: Request, data: UserLogin, db: Session = Depends(get_db)) -> dict:
    """Login and get a bearer token."""
    result = AccountService(db).login(data.email, data.password)
    return {"message": "Login successful", "token": result.token, "role": result.role}


@router.post(
    "/forgot-password",
    response_model=ForgotPasswordResponse,
    response_model_exclude_none=True,
)
@limiter.limit("3/hour")
def forgot_password(
    request: Request, data: ForgotPasswordRequest, db: Session = Depends(get_db)
) -> dict:
    """Issue a password reset token and email the reset link."""
    ticket = AccountService(db).issue_reset_token(data.email)

    if not EmailService.is_configured():
        logger.warning("Email service not configured, reset link was not sent")
        if settings.expose_reset_tokens and not settings.is_production:
            return {
                "message": "Password reset token generated (email not configured).",
                "token": ticket.token,
            }
        return {"message": "Password reset token generated, but email delivery is not configured."}

    try:
        EmailService.send_password_reset_email(ticket.email, ticket.token)
    except EmailAuthenticationError:
        # Token is already stored; the caller still gets a success-shaped response
        logger.warning("Email authentication failed, password reset email not delivered")
        return {
            "message": "Password reset initiated. Email service authentication failed.",
            "error": "Email service unavailable - check email provider credentials",
        }

    logger.info(f"Password reset email sent to: {ticket.email}")
    return {"message": "Password reset email sent"}


@router.post("/reset-password/{token}", response_model=MessageResponse)
def reset_password(
    token: str, data: ResetPasswordRequest, db: Session = Depends(get_db)
) -> dict:
    """Reset password with the token from the emailed link."""
    AccountService(db).reset_password(token, data.password)
    return {"message": "Password has been reset successfully."}
