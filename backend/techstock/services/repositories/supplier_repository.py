"""Supplier data access layer."""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from techstock.models import Supplier

if TYPE_CHECKING:
    from collections.abc import Sequence


class SupplierRepository:
    """Centralized supplier data access."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_all(self) -> "Sequence[Supplier]":
        """Find all suppliers ordered by name."""
        return self._db.query(Supplier).order_by(Supplier.name).all()

    def add(self, name: str, contact: str | None = None) -> Supplier:
        """Insert a supplier and flush to obtain its ID."""
        supplier = Supplier(name=name, contact=contact)
        self._db.add(supplier)
        self._db.flush()
        return supplier
