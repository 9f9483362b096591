"""
Anomaly CRUD operations.

Dependencies: astrogrid.boundary.db.models.anomaly_model
System role: Anomaly persistence operations
"""

from typing import Any

from astrogrid.boundary.db.CRUD.base_crud import BaseCRUD, FilterRoute
from astrogrid.boundary.db.models.anomaly_model import AnomalyModel
from astrogrid.boundary.db.statements import DESCENDING
from astrogrid.boundary.db.storage.base import Record, Storage

OPEN = "Open"


class AnomalyCRUD(BaseCRUD[AnomalyModel]):
    """CRUD operations for anomalies, newest first."""

    default_order = ("timestamp", DESCENDING)
    filter_routes = (
        FilterRoute("satellite_id", "get_by_satellite_id"),
        FilterRoute("severity", "get_by_severity"),
        FilterRoute("status", "get_unresolved", equals=OPEN),
    )

    def __init__(self) -> None:
        """Initialize AnomalyCRUD with AnomalyModel."""
        super().__init__(AnomalyModel)

    async def get_by_satellite_id(self, storage: Storage, satellite_id: Any) -> list[Record]:
        return await self.find_where(
            storage, {"satellite_id": satellite_id}, "timestamp", DESCENDING
        )

    async def get_by_severity(self, storage: Storage, severity: str) -> list[Record]:
        return await self.find_where(storage, {"severity": severity}, "timestamp", DESCENDING)

    async def get_unresolved(self, storage: Storage) -> list[Record]:
        return await self.find_where(storage, {"status": OPEN}, "timestamp", DESCENDING)


anomaly_crud = AnomalyCRUD()
