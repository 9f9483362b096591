"""
Command ORM model.

Dependencies: sqlalchemy, astrogrid.boundary.db.base
System role: Declared column set for the commands collection
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from astrogrid.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class CommandModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Command queued for uplink to a satellite.

    Attributes:
        command_type: Command name ("Orbital Adjust", "Restart System", ...)
        parameters: Caller-encoded JSON text
        status: "Pending" on creation, then "Executing"/"Completed"/"Failed"
    """

    __tablename__ = "commands"

    satellite_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("satellites.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    command_type: Mapped[str] = mapped_column(String(128), nullable=False)
    parameters: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, server_default="Pending")
    timestamp: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp()
    )
