"""Account flows: registration, login and password recovery."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from techstock.config import settings
from techstock.exceptions import (
    DuplicateEmail,
    InvalidCredentials,
    InvalidOrExpiredToken,
    NotFound,
    StorageError,
)
from techstock.models import User
from techstock.services.auth_service import AuthService
from techstock.services.repositories import DuplicateError, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""

    token: str
    role: str
    user: User


@dataclass(frozen=True)
class ResetTicket:
    """A freshly issued password reset token and where to send it."""

    email: str
    token: str
    expires_at_ms: int


class AccountService:
    """Business logic for the authentication and password-recovery flow.

    Each instance works on one request-scoped database session. ``clock``
    returns the current epoch milliseconds and exists so expiry can be tested
    without sleeping.
    """

    def __init__(self, db: Session, clock: Callable[[], int] | None = None) -> None:
        self._db = db
        self._users = UserRepository(db)
        self._clock = clock or AuthService.current_time_ms

    def register(
        self,
        email: str,
        password: str,
        name: str,
        phone: str | None = None,
        city: str | None = None,
    ) -> User:
        """Create a new user.

        Raises:
            DuplicateEmail: If the email is already registered.
            StorageError: On any other persistence failure.
        """
        user = User(
            email=email,
            password_hash=AuthService.hash_password(password),
            name=name,
            phone=phone,
            city=city,
        )
        try:
            self._users.add(user)
            self._db.commit()
        except DuplicateError as exc:
            raise DuplicateEmail() from exc
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.exception("Database error during registration")
            raise StorageError() from exc

        logger.info(f"User registered: {user.email}")
        return user

    def login(self, email: str, password: str) -> LoginResult:
        """Verify credentials and issue an access token.

        Unknown email and wrong password raise the same InvalidCredentials.
        """
        logger.info(f"Login attempt for email: {email}")
        user = self._find_user(email)

        if user is None:
            # Keep timing identical to the wrong-password path
            AuthService.verify_password(password, AuthService.get_dummy_hash())
            logger.info(f"Login failed: unknown email {email}")
            raise InvalidCredentials()

        if not AuthService.verify_password(password, user.password_hash):
            logger.info(f"Login failed: invalid password for {email}")
            raise InvalidCredentials()

        token = AuthService.create_access_token(user.id, user.role, user.name)
        logger.info(f"Login successful for user: {user.id}")
        return LoginResult(token=token, role=user.role, user=user)

    def issue_reset_token(self, email: str) -> ResetTicket:
        """Generate a reset token for ``email``, replacing any earlier one.

        Raises:
            NotFound: If no user has this email.
            StorageError: If the token cannot be persisted.
        """
        user = self._find_user(email)
        if user is None:
            raise NotFound("User not found")

        token = AuthService.generate_reset_token()
        expires_at_ms = self._clock() + settings.reset_token_expire_minutes * 60 * 1000

        user.reset_password_token = token
        user.reset_password_expires = expires_at_ms
        self._commit("issuing reset token")

        logger.info(f"Password reset token issued for user: {user.id}")
        return ResetTicket(email=user.email, token=token, expires_at_ms=expires_at_ms)

    def reset_password(self, token: str, new_password: str) -> User:
        """Consume a reset token and set a new password.

        Raises:
            InvalidOrExpiredToken: If the token is unknown, used, or expired.
            StorageError: If the update cannot be persisted.
        """
        try:
            user = self._users.find_by_valid_reset_token(token, self._clock())
        except SQLAlchemyError as exc:
            logger.exception("Database error while looking up reset token")
            raise StorageError() from exc
        if user is None:
            raise InvalidOrExpiredToken()

        user.password_hash = AuthService.hash_password(new_password)
        user.reset_password_token = None
        user.reset_password_expires = None
        self._commit("resetting password")

        logger.info(f"Password reset for user: {user.id}")
        return user

    def _find_user(self, email: str) -> User | None:
        try:
            return self._users.find_by_email(email)
        except SQLAlchemyError as exc:
            logger.exception("Database error while looking up user")
            raise StorageError() from exc

    def _commit(self, action: str) -> None:
        try:
            self._db.commit()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.exception(f"Database error while {action}")
            raise StorageError() from exc
