"""Create the database tables for local development.

Production schemas are managed outside this service; this only runs
``create_all`` against the configured database.
"""

import logging

from techstock.config import settings
from techstock.database import Base, create_db_engine
from techstock.models import Supplier, User  # noqa: F401  (register tables on Base)

logger = logging.getLogger(__name__)


def create_tables(database_url: str | None = None) -> None:
    """Create all tables that don't exist yet."""
    engine = create_db_engine(database_url or settings.database_url)
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tables created: %s", ", ".join(sorted(Base.metadata.tables)))
    finally:
        engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    create_tables()
