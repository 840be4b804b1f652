"""Business logic services."""

from .account_service import AccountService
from .auth_service import AuthService
from .email_service import EmailService

__all__ = [
    "AccountService",
    "AuthService",
    "EmailService",
]
