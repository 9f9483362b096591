"""
Ground station CRUD operations.

Dependencies: astrogrid.boundary.db.models.ground_station_model
System role: Ground station persistence operations
"""

from astrogrid.boundary.db.CRUD.base_crud import BaseCRUD, FilterRoute
from astrogrid.boundary.db.models.ground_station_model import GroundStationModel
from astrogrid.boundary.db.statements import ASCENDING
from astrogrid.boundary.db.storage.base import Record, Storage


class GroundStationCRUD(BaseCRUD[GroundStationModel]):
    """CRUD operations for ground stations, listed by name."""

    default_order = ("name", ASCENDING)
    filter_routes = (FilterRoute("status", "get_by_status"),)

    def __init__(self) -> None:
        """Initialize GroundStationCRUD with GroundStationModel."""
        super().__init__(GroundStationModel)

    async def get_by_status(self, storage: Storage, status: str) -> list[Record]:
        return await self.find_where(storage, {"status": status})


ground_station_crud = GroundStationCRUD()
