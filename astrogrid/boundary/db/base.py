"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and reusable mixins
for common fields (integer ids, timestamps).

The models only declare table schemas; rows are read and written through
parameterized text statements, so column defaults must live server-side.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class IntegerIDMixin:
    """
    Mixin providing an auto-increment integer primary key.

    Attributes:
        id: Integer primary key assigned by the store on insert
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    """
    Mixin providing server-populated timestamp columns.

    created_at is filled by the store on insert. updated_at is optional and
    only written when callers include it in a payload.

    Attributes:
        created_at: Row creation timestamp
        updated_at: Last modification timestamp, if any
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.current_timestamp(),
        nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime,
        nullable=True,
        default=None,
    )
