"""
Test suite for UserService.

Tests registration, login, profile and password updates, and listing.
Mocked storage covers the guard paths; SQLite-backed storage covers the
full credential flow.

System role: Verification of credential lookup service
"""

from unittest.mock import AsyncMock

import pytest

from astrogrid.application.services import (
    EmailAlreadyInUse,
    InvalidCredentials,
    UserNotFound,
    UserService,
)
from astrogrid.application.services.user_service import hash_password, verify_password
from astrogrid.boundary.db.storage import SqlStorage


@pytest.fixture
def service(sql_storage: SqlStorage) -> UserService:
    """Provide UserService over in-memory SQLite."""
    return UserService(sql_storage)


class TestPasswordHashing:
    """Test suite for hash_password() and verify_password()."""

    def test_hash_should_be_salted(self) -> None:
        """Test the same password hashes differently with fresh salts."""
        assert hash_password("orbit") != hash_password("orbit")

    def test_hash_should_be_bcrypt_format(self) -> None:
        """Test digests carry the bcrypt scheme and cost prefix."""
        assert hash_password("orbit").startswith("$2b$12$")

    def test_verify_should_accept_matching_password(self) -> None:
        """Test a digest verifies against its own password only."""
        # Arrange
        stored = hash_password("orbit")

        # Act & Assert
        assert verify_password("orbit", stored) is True
        assert verify_password("apogee", stored) is False

    @pytest.mark.parametrize("stored", [None, "", "plaintext"])
    def test_verify_should_reject_malformed_digest(self, stored) -> None:
        """Test missing or unsalted values never verify."""
        assert verify_password("plaintext", stored) is False


class TestRegisterAndLogin:
    """Test suite for register_user() and login_user()."""

    @pytest.mark.asyncio
    async def test_register_should_return_profile(self, service: UserService) -> None:
        """Test registration stores the user and returns its profile."""
        # Act
        profile = await service.register_user("Ada", "ada@astrogrid.com", "orbit")

        # Assert
        assert profile.uid == 1
        assert profile.display_name == "Ada"
        assert profile.role == "Observer"

    @pytest.mark.asyncio
    async def test_register_should_not_store_plain_password(
        self, service: UserService, sql_storage: SqlStorage
    ) -> None:
        """Test the password column holds a digest."""
        # Arrange
        await service.register_user("Ada", "ada@astrogrid.com", "orbit")

        # Act
        rows = await sql_storage.execute("SELECT password FROM users")

        # Assert
        assert rows[0]["password"] != "orbit"
        assert verify_password("orbit", rows[0]["password"]) is True

    @pytest.mark.asyncio
    async def test_register_should_reject_duplicate_email(self, service: UserService) -> None:
        """Test an email can only be registered once."""
        # Arrange
        await service.register_user("Ada", "ada@astrogrid.com", "orbit")

        # Act & Assert
        with pytest.raises(EmailAlreadyInUse):
            await service.register_user("Eve", "ada@astrogrid.com", "apogee", role="Admin")

    @pytest.mark.asyncio
    async def test_login_should_return_profile_on_match(self, service: UserService) -> None:
        """Test valid credentials return the stored profile."""
        # Arrange
        await service.register_user("Ada", "ada@astrogrid.com", "orbit", role="Controller")

        # Act
        profile = await service.login_user("ada@astrogrid.com", "orbit")

        # Assert
        assert profile.email == "ada@astrogrid.com"
        assert profile.role == "Controller"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [("ada@astrogrid.com", "wrong"), ("nobody@astrogrid.com", "orbit")],
    )
    async def test_login_should_reject_bad_credentials(
        self, service: UserService, email: str, password: str
    ) -> None:
        """Test unknown emails and wrong passwords fail the same way."""
        # Arrange
        await service.register_user("Ada", "ada@astrogrid.com", "orbit")

        # Act & Assert
        with pytest.raises(InvalidCredentials):
            await service.login_user(email, password)


class TestProfileUpdates:
    """Test suite for update_user_profile(), update_password() and list_users()."""

    @pytest.mark.asyncio
    async def test_update_profile_should_apply_known_fields_only(
        self, service: UserService
    ) -> None:
        """Test name/email/role change and other keys are dropped."""
        # Arrange
        profile = await service.register_user("Ada", "ada@astrogrid.com", "orbit")

        # Act
        updated = await service.update_user_profile(
            profile.uid, {"name": "Ada L.", "role": "Admin", "password": "ignored"}
        )

        # Assert
        assert updated.display_name == "Ada L."
        assert updated.role == "Admin"
        await service.login_user("ada@astrogrid.com", "orbit")

    @pytest.mark.asyncio
    async def test_update_profile_should_raise_for_missing_user(
        self, service: UserService
    ) -> None:
        """Test updating a nonexistent user raises UserNotFound."""
        with pytest.raises(UserNotFound):
            await service.update_user_profile(99, {"name": "Ghost"})

    @pytest.mark.asyncio
    async def test_update_password_should_change_login(self, service: UserService) -> None:
        """Test the new password works and the old one does not."""
        # Arrange
        profile = await service.register_user("Ada", "ada@astrogrid.com", "orbit")

        # Act
        changed = await service.update_password(profile.uid, "apogee")

        # Assert
        assert changed is True
        await service.login_user("ada@astrogrid.com", "apogee")
        with pytest.raises(InvalidCredentials):
            await service.login_user("ada@astrogrid.com", "orbit")

    @pytest.mark.asyncio
    async def test_update_password_should_report_missing_user(
        self, service: UserService
    ) -> None:
        """Test changing the password of an unknown id returns False."""
        assert await service.update_password(99, "apogee") is False

    @pytest.mark.asyncio
    async def test_list_users_should_omit_password(self, service: UserService) -> None:
        """Test listings are name-ordered and carry no password material."""
        # Arrange
        await service.register_user("Zed", "zed@astrogrid.com", "x")
        await service.register_user("Ada", "ada@astrogrid.com", "y")

        # Act
        users = await service.list_users()

        # Assert
        assert [user["name"] for user in users] == ["Ada", "Zed"]
        assert all("password" not in user for user in users)
        assert set(users[0]) == {"id", "name", "email", "role", "created_at"}


class TestWithMockedStorage:
    """Test suite for guard paths that never reach the store."""

    @pytest.mark.asyncio
    async def test_login_should_fail_when_lookup_finds_nothing(
        self, mock_storage: AsyncMock
    ) -> None:
        """Test an empty email lookup is reported as bad credentials."""
        # Arrange
        service = UserService(mock_storage)

        # Act & Assert
        with pytest.raises(InvalidCredentials):
            await service.login_user("ada@astrogrid.com", "orbit")
        mock_storage.execute.assert_awaited_once()
