"""
Telemetry CRUD operations.

Telemetry is append-only: frames are created and read, never edited or
removed through the adapter.

Dependencies: astrogrid.boundary.db.models.telemetry_model
System role: Telemetry persistence operations
"""

from typing import Any

from astrogrid.boundary.db import statements
from astrogrid.boundary.db.CRUD.base_crud import BaseCRUD, FilterRoute
from astrogrid.boundary.db.models.telemetry_model import TelemetryModel
from astrogrid.boundary.db.statements import DESCENDING
from astrogrid.boundary.db.storage.base import Record, Storage


class TelemetryCRUD(BaseCRUD[TelemetryModel]):
    """CRUD operations for telemetry frames, newest first."""

    default_order = ("timestamp", DESCENDING)
    filter_routes = (FilterRoute("satellite_id", "get_by_satellite_id"),)
    mutable = False

    def __init__(self) -> None:
        """Initialize TelemetryCRUD with TelemetryModel."""
        super().__init__(TelemetryModel)

    async def get_by_satellite_id(self, storage: Storage, satellite_id: Any) -> list[Record]:
        return await self.find_where(
            storage, {"satellite_id": satellite_id}, "timestamp", DESCENDING
        )

    async def get_latest_for_satellite(
        self,
        storage: Storage,
        satellite_id: Any,
        limit: int = 10,
    ) -> list[Record]:
        """
        Retrieve the most recent frames for one satellite.

        Args:
            storage: Storage handle
            satellite_id: Satellite primary key
            limit: Maximum number of frames

        Returns:
            Up to limit frames, newest first
        """
        stmt = statements.select_page(
            self.table,
            "timestamp",
            DESCENDING,
            limit,
            0,
            conditions={"satellite_id": satellite_id},
        )
        return await self._fetch(storage, stmt)


telemetry_crud = TelemetryCRUD()
