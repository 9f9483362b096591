"""
Ground station ORM model.

Dependencies: sqlalchemy, astrogrid.boundary.db.base
System role: Declared column set for the ground_stations collection
"""

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from astrogrid.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class GroundStationModel(Base, IntegerIDMixin, TimestampMixin):
    """Ground station with geodetic position and operational status."""

    __tablename__ = "ground_stations"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    elevation: Mapped[float] = mapped_column(Float, nullable=False, server_default="0")
    status: Mapped[str] = mapped_column(String(64), nullable=False, server_default="Operational")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
