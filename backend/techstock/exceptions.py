"""Domain exceptions for the TechStock API.

Each exception carries a stable error code and the HTTP status it maps to.
The handlers registered in ``techstock.main`` render them as ``ErrorResponse``.
"""

from fastapi import status


class TechStockError(Exception):
    """Base exception for all domain errors."""

    code = "ServerError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TechStockError):
    """Required input missing or malformed."""

    code = "ValidationError"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class DuplicateEmail(TechStockError):
    """Registration attempted with an email that already exists."""

    code = "DuplicateEmail"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already exists"


class InvalidCredentials(TechStockError):
    """Unknown email or wrong password. Both share one message."""

    code = "InvalidCredentials"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class NotFound(TechStockError):
    """Requested entity does not exist."""

    code = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidOrExpiredToken(TechStockError):
    """Reset token unknown, already used, or past its expiry."""

    code = "InvalidOrExpiredToken"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Password reset token is invalid or has expired."


class EmailTransportError(TechStockError):
    """The email provider rejected or failed to deliver a message."""

    code = "EmailTransportError"
    default_message = "Email service unavailable"


class EmailAuthenticationError(EmailTransportError):
    """The email provider rejected our credentials."""

    default_message = "Email service authentication failed"


class StorageError(TechStockError):
    """Persistence failure other than a known constraint violation."""

    code = "StorageError"
    default_message = "Database error"
