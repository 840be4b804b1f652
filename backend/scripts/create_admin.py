"""Create or promote a storefront administrator account."""

import argparse
import getpass
import logging

from sqlalchemy.orm import Session as DBSession

from techstock.models.user import User
from techstock.services.auth_service import AuthService

logger = logging.getLogger(__name__)


def create_admin(
    db: DBSession,
    email: str,
    password: str | None = None,
    name: str = "Administrator",
) -> tuple[User, bool]:
    """
    Create an admin user, or promote an existing account to admin.

    Args:
        db: Database session
        email: Admin email address
        password: Password for a new account, or a replacement for an existing one
        name: Display name for a new account

    Returns:
        Tuple of (User, created) where created is False for an existing account
    """
    email = email.strip().lower()
    existing_user = db.query(User).filter(User.email == email).first()

    if existing_user:
        existing_user.role = "admin"
        if password:
            existing_user.password_hash = AuthService.hash_password(password)
            logger.info("Password updated for existing account")
        db.commit()
        logger.info("Existing account promoted to admin: %s", existing_user.id)
        return existing_user, False

    if not password:
        raise ValueError("A password is required to create a new admin account")

    user = User(
        email=email,
        password_hash=AuthService.hash_password(password),
        name=name,
        role="admin",
    )
    db.add(user)
    db.commit()

    logger.info("Created admin account: %s (id: %s)", email, user.id)
    return user, True


if __name__ == "__main__":
    """Run as standalone script."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("email")
    parser.add_argument("--name", default="Administrator")
    parser.add_argument(
        "--keep-password",
        action="store_true",
        help="Promote an existing account without changing its password",
    )
    args = parser.parse_args()

    password = None if args.keep_password else getpass.getpass("Admin password: ")

    from techstock.config import settings
    from techstock.database import create_db_engine, create_session_factory

    engine = create_db_engine(settings.database_url)
    db = create_session_factory(engine)()
    try:
        user, created = create_admin(db, args.email, password, args.name)
        logger.info("")
        logger.info("Admin setup complete:")
        logger.info("  Email: %s", user.email)
        logger.info("  ID: %s", user.id)
        logger.info("  Created: %s", created)
        logger.info("  Is admin: %s", user.is_admin)
    finally:
        db.close()
        engine.dispose()
