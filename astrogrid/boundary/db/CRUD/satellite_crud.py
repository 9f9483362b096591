"""
Satellite CRUD operations.

Dependencies: astrogrid.boundary.db.models.satellite_model
System role: Satellite persistence operations
"""

from astrogrid.boundary.db.CRUD.base_crud import BaseCRUD, FilterRoute
from astrogrid.boundary.db.models.satellite_model import SatelliteModel
from astrogrid.boundary.db.statements import ASCENDING
from astrogrid.boundary.db.storage.base import Record, Storage


class SatelliteCRUD(BaseCRUD[SatelliteModel]):
    """CRUD operations for satellites, listed by name."""

    default_order = ("name", ASCENDING)
    filter_routes = (FilterRoute("status", "get_by_status"),)

    def __init__(self) -> None:
        """Initialize SatelliteCRUD with SatelliteModel."""
        super().__init__(SatelliteModel)

    async def get_by_status(self, storage: Storage, status: str) -> list[Record]:
        return await self.find_where(storage, {"status": status})


satellite_crud = SatelliteCRUD()
