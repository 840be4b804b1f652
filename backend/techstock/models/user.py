"""User model for authentication."""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from techstock.database import Base


class User(Base):
    """Storefront customer or administrator.

    Column names follow the existing ``users`` table; the reset token pair is
    stored inline, so each user holds at most one pending reset.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column("user_id", Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column("password", String(255))
    name: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(32))
    city: Mapped[str | None] = mapped_column(String(100))
    role: Mapped[str] = mapped_column(String(32), default="user", server_default="user")
    reset_password_token: Mapped[str | None] = mapped_column(
        "resetPasswordToken", String(64), index=True
    )
    # Epoch milliseconds
    reset_password_expires: Mapped[int | None] = mapped_column("resetPasswordExpires", BigInteger)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
