"""
Satellite ORM model.

Dependencies: sqlalchemy, astrogrid.boundary.db.base
System role: Declared column set for the satellites collection
"""

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from astrogrid.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class SatelliteModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Satellite tracked by the ground segment.

    Attributes:
        name: Display name, used as the default sort key
        status: Lifecycle status ("Operational", "In Development", ...)
        orbit: Orbit class ("LEO", "GEO", ...)
        altitude: Nominal altitude in km
        mass: Launch mass in kg
        mission_life: Planned mission life in years (free text)
    """

    __tablename__ = "satellites"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(64), nullable=False, server_default="Operational")
    type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    orbit: Mapped[str | None] = mapped_column(String(32), nullable=True)
    operator: Mapped[str | None] = mapped_column(String(128), nullable=True)
    launch_date: Mapped[str | None] = mapped_column(String(32), nullable=True)
    altitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    mass: Mapped[float | None] = mapped_column(Float, nullable=True)
    mission_life: Mapped[str | None] = mapped_column(String(32), nullable=True)
