"""
User credential service.

Plain credential lookup over the users collection: registration, login,
profile and password updates. Passwords are stored as bcrypt hashes.
Session handling belongs to the caller.

Dependencies: bcrypt, astrogrid.boundary.db.CRUD
System role: Credential lookup use cases
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

import bcrypt

from astrogrid.boundary.db.CRUD.user_crud import user_crud
from astrogrid.boundary.db.storage.base import Record, Storage
from astrogrid.models.user import UserProfile

logger = logging.getLogger(__name__)

_ROUNDS = 12
_PROFILE_FIELDS = ("name", "email", "role")
_LISTED_FIELDS = ("id", "name", "email", "role", "created_at")


class AuthError(Exception):
    """Base exception for credential operations."""


class InvalidCredentials(AuthError):
    """Email/password pair did not match a user."""


class EmailAlreadyInUse(AuthError):
    """Registration attempted with an existing email."""


class UserNotFound(AuthError):
    """User id does not exist."""


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=_ROUNDS)).decode()


def verify_password(password: str, stored: str | None) -> bool:
    """
    Check a password against a stored bcrypt hash.

    Returns:
        False for a mismatch or for a value that is not a bcrypt hash
    """
    if not stored:
        return False
    try:
        return bcrypt.checkpw(password.encode(), stored.encode())
    except ValueError:
        return False


def _now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


class UserService:
    """Credential lookup orchestrator."""

    def __init__(self, storage: Storage) -> None:
        """
        Initialize user service with a storage handle.

        Args:
            storage: Storage shared by the process
        """
        self.storage = storage

    async def register_user(
        self,
        name: str,
        email: str,
        password: str,
        role: str = "Observer",
    ) -> UserProfile:
        """
        Create a user account.

        Raises:
            EmailAlreadyInUse: If email is already registered
        """
        if await user_crud.get_by_email(self.storage, email) is not None:
            raise EmailAlreadyInUse("Email already in use")

        row = await user_crud.create(
            self.storage,
            {"name": name, "email": email, "password": hash_password(password), "role": role},
        )
        if row is None:
            raise AuthError("User creation failed")
        logger.info("User registered", extra={"user_id": row["id"], "role": role})
        return UserProfile.from_row(row)

    async def login_user(self, email: str, password: str) -> UserProfile:
        """
        Look up a user by credentials.

        Raises:
            InvalidCredentials: If email is unknown or password does not match
        """
        row = await user_crud.get_by_email(self.storage, email)
        if row is None or not verify_password(password, row.get("password")):
            logger.warning("Login failed", extra={"email": email})
            raise InvalidCredentials("Invalid email or password")
        return UserProfile.from_row(row)

    async def update_user_profile(self, user_id: int, updates: Mapping[str, Any]) -> UserProfile:
        """
        Update name, email and/or role. Other keys are ignored.

        Raises:
            UserNotFound: If user_id does not exist after the update
        """
        changes = {field: updates[field] for field in _PROFILE_FIELDS if updates.get(field)}
        changes["updated_at"] = _now()
        row = await user_crud.update_by_id(self.storage, user_id, changes)
        if row is None:
            raise UserNotFound(f"User {user_id} does not exist")
        return UserProfile.from_row(row)

    async def update_password(self, user_id: int, new_password: str) -> bool:
        """
        Replace a user's password.

        Returns:
            True if the user exists and was updated, False otherwise
        """
        row = await user_crud.update_by_id(
            self.storage,
            user_id,
            {"password": hash_password(new_password), "updated_at": _now()},
        )
        return row is not None

    async def list_users(self) -> list[Record]:
        """All users by name, without password material."""
        rows = await user_crud.get_all(self.storage)
        return [{field: row.get(field) for field in _LISTED_FIELDS} for row in rows]
