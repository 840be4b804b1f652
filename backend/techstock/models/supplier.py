"""Supplier model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from techstock.database import Base


class Supplier(Base):
    """Vendor that stocks the storefront catalog."""

    __tablename__ = "suppliers"

    id: Mapped[int] = mapped_column("supplier_id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    contact: Mapped[str | None] = mapped_column(String(255))

    def __repr__(self) -> str:
        return f"<Supplier(id={self.id}, name='{self.name}')>"
