"""
Anomaly ORM model.

Dependencies: sqlalchemy, astrogrid.boundary.db.base
System role: Declared column set for the anomalies collection
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from astrogrid.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class AnomalyModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Anomaly reported against a satellite.

    Attributes:
        severity: "Low", "Medium", "High" or "Critical"
        status: "Open" until resolved
        resolved_by: User id that closed the anomaly
        resolved_at: Resolution time
    """

    __tablename__ = "anomalies"

    satellite_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("satellites.id", ondelete="CASCADE"), nullable=False
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    severity: Mapped[str] = mapped_column(String(32), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, server_default="Open")
    timestamp: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp()
    )
    resolved_by: Mapped[int | None] = mapped_column(Integer, nullable=True)
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
