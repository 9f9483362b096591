"""
Telemetry ORM model.

Dependencies: sqlalchemy, astrogrid.boundary.db.base
System role: Declared column set for the telemetry collection
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from astrogrid.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class TelemetryModel(Base, IntegerIDMixin, TimestampMixin):
    """
    One telemetry frame for a satellite.

    Attributes:
        satellite_id: Owning satellite
        timestamp: Frame time, default sort key (newest first)
        data: Free-form readings (power, temperature, signal, ...)
    """

    __tablename__ = "telemetry"

    satellite_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("satellites.id", ondelete="CASCADE"), nullable=False
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp()
    )
    data: Mapped[dict | None] = mapped_column(JSON, nullable=True)
