"""SQLAlchemy ORM models."""

from techstock.models.supplier import Supplier
from techstock.models.user import User

__all__ = [
    "Supplier",
    "User",
]
