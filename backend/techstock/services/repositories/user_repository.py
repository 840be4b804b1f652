"""User data access layer."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from techstock.models import User

from .exceptions import DuplicateError


def _is_unique_violation(exc: IntegrityError) -> bool:
    # MySQL: "Duplicate entry", SQLite: "UNIQUE constraint failed",
    # PostgreSQL: "duplicate key value violates unique constraint"
    message = str(exc.orig).lower()
    return "duplicate" in message or "unique" in message


class UserRepository:
    """Centralized user data access.

    Naming conventions:
    - find_* : Query that may return None
    - add : Insert that flushes immediately so constraint violations surface here
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_email(self, email: str) -> User | None:
        """Find user by (normalized) email."""
        return self._db.query(User).filter(User.email == email).first()

    def find_by_valid_reset_token(self, token: str, now_ms: int) -> User | None:
        """Find the user holding ``token`` if it has not yet expired."""
        return (
            self._db.query(User)
            .filter(
                User.reset_password_token == token,
                User.reset_password_expires > now_ms,
            )
            .first()
        )

    def add(self, user: User) -> User:
        """Insert a user, raising DuplicateError when the email is taken."""
        self._db.add(user)
        try:
            self._db.flush()
        except IntegrityError as exc:
            self._db.rollback()
            if _is_unique_violation(exc):
                raise DuplicateError("User", "email", user.email) from exc
            raise
        return user
