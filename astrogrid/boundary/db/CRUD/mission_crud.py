"""
Mission CRUD operations.

Dependencies: astrogrid.boundary.db.models.mission_model
System role: Mission persistence operations
"""

from astrogrid.boundary.db.CRUD.base_crud import BaseCRUD, FilterRoute
from astrogrid.boundary.db.models.mission_model import MissionModel
from astrogrid.boundary.db.statements import ASCENDING
from astrogrid.boundary.db.storage.base import Record, Storage


class MissionCRUD(BaseCRUD[MissionModel]):
    """CRUD operations for missions, listed by name."""

    default_order = ("name", ASCENDING)
    filter_routes = (FilterRoute("status", "get_by_status"),)

    def __init__(self) -> None:
        """Initialize MissionCRUD with MissionModel."""
        super().__init__(MissionModel)

    async def get_by_status(self, storage: Storage, status: str) -> list[Record]:
        return await self.find_where(storage, {"status": status})


mission_crud = MissionCRUD()
