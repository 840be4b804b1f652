"""Rate limiter configuration for auth endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from techstock.config import settings

# Rate limiter instance - shared across modules. Off unless RATE_LIMIT_ENABLED is set.
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
