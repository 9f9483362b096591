"""
User ORM model.

Dependencies: sqlalchemy, astrogrid.boundary.db.base
System role: Declared column set for the users collection
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from astrogrid.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class UserModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Operator account.

    Attributes:
        email: Unique login identifier
        password: bcrypt hash ("$2b$12$..."), never plaintext
        role: "Admin", "Controller" or "Observer"
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(String(32), nullable=False, server_default="Observer")
