"""
Command CRUD operations.

Dependencies: astrogrid.boundary.db.models.command_model
System role: Command queue persistence operations
"""

from typing import Any, Mapping

from astrogrid.boundary.db.CRUD.base_crud import BaseCRUD, FilterRoute
from astrogrid.boundary.db.models.command_model import CommandModel
from astrogrid.boundary.db.statements import ASCENDING, DESCENDING
from astrogrid.boundary.db.storage.base import Record, Storage

PENDING = "Pending"


class CommandCRUD(BaseCRUD[CommandModel]):
    """
    CRUD operations for commands, newest first.

    Every new command enters the queue as Pending, whatever the payload says.
    """

    default_order = ("timestamp", DESCENDING)
    filter_routes = (
        FilterRoute("satellite_id", "get_by_satellite_id"),
        FilterRoute("user_id", "get_by_user_id"),
        FilterRoute("status", "get_pending", equals=PENDING),
    )

    def __init__(self) -> None:
        """Initialize CommandCRUD with CommandModel."""
        super().__init__(CommandModel)

    async def create(self, storage: Storage, data: Mapping[str, Any]) -> Record | None:
        return await super().create(storage, {**data, "status": PENDING})

    async def get_by_user_id(self, storage: Storage, user_id: Any) -> list[Record]:
        return await self.find_where(storage, {"user_id": user_id}, "timestamp", DESCENDING)

    async def get_by_satellite_id(self, storage: Storage, satellite_id: Any) -> list[Record]:
        return await self.find_where(
            storage, {"satellite_id": satellite_id}, "timestamp", DESCENDING
        )

    async def get_pending(self, storage: Storage) -> list[Record]:
        """Pending commands in uplink order (oldest first)."""
        return await self.find_where(storage, {"status": PENDING}, "timestamp", ASCENDING)


command_crud = CommandCRUD()
