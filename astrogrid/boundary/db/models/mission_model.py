"""
Mission ORM model.

Dependencies: sqlalchemy, astrogrid.boundary.db.base
System role: Declared column set for the missions collection
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from astrogrid.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class MissionModel(Base, IntegerIDMixin, TimestampMixin):
    """Mission with a planned window and an optional primary satellite."""

    __tablename__ = "missions"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, server_default="Planned")
    start_date: Mapped[str | None] = mapped_column(String(32), nullable=True)
    end_date: Mapped[str | None] = mapped_column(String(32), nullable=True)
    satellite_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("satellites.id", ondelete="SET NULL"), nullable=True
    )
