"""
User CRUD operations.

Dependencies: astrogrid.boundary.db.models.user_model
System role: User persistence operations
"""

from astrogrid.boundary.db.CRUD.base_crud import BaseCRUD, FilterRoute
from astrogrid.boundary.db.models.user_model import UserModel
from astrogrid.boundary.db.statements import ASCENDING
from astrogrid.boundary.db.storage.base import Record, Storage


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for users, listed by name."""

    default_order = ("name", ASCENDING)
    filter_routes = (FilterRoute("email", "get_by_email", single=True),)

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_email(self, storage: Storage, email: str) -> Record | None:
        """
        Retrieve user by email address.

        Returns:
            User row if found, None otherwise
        """
        rows = await self.find_where(storage, {"email": email})
        return rows[0] if rows else None


user_crud = UserCRUD()
