"""Authentication service for password hashing, JWT and reset-token management."""

import logging
import secrets
import time
from datetime import UTC, datetime, timedelta

import bcrypt
import jwt

from techstock.config import settings

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
RESET_TOKEN_BYTES = 20


class AuthService:
    """Service for authentication primitives."""

    # Hash used when the user doesn't exist, so failed logins take the same time
    # whether or not the email is registered
    _DUMMY_HASH: str | None = None

    @staticmethod
    def get_dummy_hash() -> str:
        """Get a dummy password hash for timing-consistent verification."""
        if AuthService._DUMMY_HASH is None:
            AuthService._DUMMY_HASH = AuthService.hash_password(secrets.token_hex(16))
        return AuthService._DUMMY_HASH

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using bcrypt (cost factor 10)."""
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    @staticmethod
    def verify_password(password: str, hashed: str) -> bool:
        """Verify a password against its hash."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError as e:
            logger.error(f"Password verification error: {e}")
            return False

    @staticmethod
    def create_access_token(
        user_id: int,
        role: str,
        username: str | None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a JWT access token carrying the user's id, role and display name."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

        now = datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "user_id": user_id,
            "role": role,
            "username": username,
            "exp": now + expires_delta,
            "iat": now,
            "type": "access",
        }
        return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    @staticmethod
    def decode_access_token(token: str) -> dict | None:
        """Decode and validate a JWT token."""
        try:
            payload = jwt.decode(
                token,
                settings.jwt_secret_key,
                algorithms=[settings.jwt_algorithm],
            )
            return payload
        except jwt.ExpiredSignatureError:
            logger.debug("Token expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Invalid token: {e}")
            return None

    @staticmethod
    def generate_reset_token() -> str:
        """Generate a random password reset token (20 bytes, hex-encoded)."""
        return secrets.token_hex(RESET_TOKEN_BYTES)

    @staticmethod
    def current_time_ms() -> int:
        """Current time as epoch milliseconds, the unit reset expiries are stored in."""
        return int(time.time() * 1000)
