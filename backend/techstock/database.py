"""Database configuration and session management."""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


# Base class for ORM models
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


def create_db_engine(database_url: str) -> Engine:
    """Create the process-wide engine with connection pooling.

    SQLite (local development and tests) gets the driver defaults; server
    databases get a bounded pool with health checks.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=False,
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Enable connection health checks
        pool_size=10,  # Number of connections to maintain
        max_overflow=0,  # Hard cap at pool_size, extra requests wait for a connection
        pool_recycle=3600,  # Recycle connections after 1 hour
        echo=False,  # Set to True for SQL query logging in development
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create the session factory bound to an engine."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,  # Prevent lazy loading errors after commit
    )


# Dependency for FastAPI routes
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    The session factory is created in the application lifespan and kept on
    ``app.state``; every request gets its own session, closed afterwards.

    Yields:
        Session: SQLAlchemy database session

    Example:
        @router.get("/suppliers")
        def list_suppliers(db: Session = Depends(get_db)):
            return SupplierRepository(db).find_all()
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
