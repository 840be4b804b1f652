"""Response bodies shared by the /api routers and the error handlers."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One rejected request field, as reported with a ``ValidationError``."""

    field: str | None = Field(None, description="Dotted path of the offending field")
    message: str = Field(..., description="Why the value was rejected")


class ErrorResponse(BaseModel):
    """Body of every non-2xx response.

    ``error`` is the machine-readable code. Domain failures use
    ``ValidationError``, ``DuplicateEmail``, ``InvalidCredentials``,
    ``NotFound``, ``InvalidOrExpiredToken``, ``EmailTransportError`` and
    ``StorageError``. Framework-level failures use the HTTP reason phrase
    without spaces, e.g. ``Unauthorized``, ``Forbidden`` or ``TooManyRequests``.
    """

    error: str = Field(..., description="Error code, e.g. 'DuplicateEmail'")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] | None = Field(None, description="Per-field validation failures")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    path: str | None = Field(None, description="Request path that failed")


class MessageResponse(BaseModel):
    message: str
