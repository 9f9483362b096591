"""
Test suite for EntityRegistry routing and unknown-collection policy.

Uses a mocked Storage to verify which specialized lookup a filters
mapping is dispatched to.

System role: Verification of name-based table routing
"""

from unittest.mock import AsyncMock

import pytest

from astrogrid.boundary.db.CRUD import satellite_crud
from astrogrid.boundary.db.exceptions import (
    ImmutableCollection,
    InvalidField,
    UnknownCollection,
)
from astrogrid.boundary.db.registry import Collection, DEFAULT_ENTRIES, EntityRegistry
from astrogrid.boundary.db.storage.base import WriteResult
from astrogrid.configs.database import UnknownCollectionPolicy


class TestRegistryConstruction:
    """Test suite for registry construction and resolution."""

    def test_registry_should_cover_every_collection(self, registry: EntityRegistry) -> None:
        """Test each enumerated collection maps to its own table."""
        for member in Collection:
            assert registry.table_for(member.value) == member.value

    def test_registry_should_reject_incomplete_entries(self) -> None:
        """Test a registry missing a collection cannot be built."""
        with pytest.raises(ValueError, match="missions"):
            EntityRegistry({Collection.SATELLITES: satellite_crud})

    def test_resolve_should_soft_fail_only_when_requested(self, registry: EntityRegistry) -> None:
        """Test soft resolution returns None and hard resolution raises."""
        assert registry.resolve("widgets", soft=True) is None
        with pytest.raises(UnknownCollection):
            registry.resolve("widgets")

    def test_default_entries_should_be_read_only(self) -> None:
        """Test the shared default mapping cannot be mutated."""
        with pytest.raises(TypeError):
            DEFAULT_ENTRIES[Collection.SATELLITES] = None  # type: ignore[index]


class TestQueryCollectionRouting:
    """Test suite for query_collection() filter-priority dispatch."""

    @pytest.mark.asyncio
    async def test_anomalies_should_route_satellite_id_first(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test satellite_id outranks severity; the lower-priority key is dropped."""
        # Act
        await registry.query_collection(
            mock_storage, "anomalies", {"severity": "High", "satellite_id": 3}
        )

        # Assert
        mock_storage.execute.assert_awaited_once_with(
            "SELECT * FROM anomalies WHERE satellite_id = :w_satellite_id ORDER BY timestamp DESC",
            {"w_satellite_id": 3},
        )

    @pytest.mark.asyncio
    async def test_anomalies_should_route_open_status_to_unresolved(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test status == Open dispatches to the unresolved lookup."""
        # Act
        await registry.query_collection(mock_storage, "anomalies", {"status": "Open"})

        # Assert
        mock_storage.execute.assert_awaited_once_with(
            "SELECT * FROM anomalies WHERE status = :w_status ORDER BY timestamp DESC",
            {"w_status": "Open"},
        )

    @pytest.mark.asyncio
    async def test_anomalies_should_fall_back_to_all_for_other_status(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test a status with no specialized lookup returns the full collection."""
        # Act
        await registry.query_collection(mock_storage, "anomalies", {"status": "Resolved"})

        # Assert
        mock_storage.execute.assert_awaited_once_with(
            "SELECT * FROM anomalies ORDER BY timestamp DESC", {}
        )

    @pytest.mark.asyncio
    async def test_commands_should_list_pending_oldest_first(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test pending commands are ordered by timestamp ascending."""
        # Act
        await registry.query_collection(mock_storage, "commands", {"status": "Pending"})

        # Assert
        sql, params = mock_storage.execute.await_args.args
        assert sql == "SELECT * FROM commands WHERE status = :w_status ORDER BY timestamp ASC"
        assert params == {"w_status": "Pending"}

    @pytest.mark.asyncio
    async def test_commands_should_prefer_user_id_over_status(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test user_id outranks status on commands."""
        # Act
        await registry.query_collection(
            mock_storage, "commands", {"status": "Pending", "user_id": 2}
        )

        # Assert
        _, params = mock_storage.execute.await_args.args
        assert params == {"w_user_id": 2}

    @pytest.mark.asyncio
    async def test_users_should_wrap_single_email_match(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test the email lookup yields at most one snapshot."""
        # Arrange
        mock_storage.execute.return_value = [{"id": 1, "email": "admin@astrogrid.com"}]

        # Act
        result = await registry.query_collection(
            mock_storage, "users", {"email": "admin@astrogrid.com"}
        )

        # Assert
        assert [snapshot.id for snapshot in result] == [1]

    @pytest.mark.asyncio
    async def test_users_should_return_empty_for_unknown_email(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test a missing email yields an empty result."""
        # Act
        result = await registry.query_collection(mock_storage, "users", {"email": "nobody@x"})

        # Assert
        assert result.empty is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [None, "", 0])
    async def test_query_collection_should_ignore_falsy_filter_values(
        self, mock_storage: AsyncMock, registry: EntityRegistry, value
    ) -> None:
        """Test None, empty and zero values fall back to the full listing."""
        # Act
        await registry.query_collection(mock_storage, "telemetry", {"satellite_id": value})

        # Assert
        mock_storage.execute.assert_awaited_once_with(
            "SELECT * FROM telemetry ORDER BY timestamp DESC", {}
        )

    @pytest.mark.asyncio
    async def test_empty_status_should_list_whole_collection(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test an empty status string does not filter satellites."""
        # Act
        await registry.query_collection(mock_storage, "satellites", {"status": ""})

        # Assert
        mock_storage.execute.assert_awaited_once_with(
            "SELECT * FROM satellites ORDER BY name ASC", {}
        )


class TestUnknownCollectionPolicy:
    """Test suite for read/write asymmetry on unregistered names."""

    @pytest.mark.asyncio
    async def test_reads_should_soft_fail_under_warn(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test every registry read degrades to an empty result."""
        # Act
        collection = await registry.get_collection(mock_storage, "widgets")
        queried = await registry.query_collection(mock_storage, "widgets", {"status": "x"})
        document = await registry.get_document(mock_storage, "widgets", 1)
        page = await registry.get_paginated(mock_storage, "widgets")

        # Assert
        assert collection.empty and collection.docs == []
        assert queried.empty
        assert document.exists() is False
        assert page.items == [] and page.total == 0
        mock_storage.execute.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("policy", list(UnknownCollectionPolicy))
    async def test_writes_should_always_raise(
        self, mock_storage: AsyncMock, policy: UnknownCollectionPolicy
    ) -> None:
        """Test writes raise UnknownCollection whatever the policy."""
        # Arrange
        registry = EntityRegistry(policy=policy)

        # Act & Assert
        with pytest.raises(UnknownCollection):
            await registry.create_document(mock_storage, "widgets", {"name": "x"})
        with pytest.raises(UnknownCollection):
            await registry.update_document(mock_storage, "widgets", 1, {"name": "x"})
        with pytest.raises(UnknownCollection):
            await registry.delete_document(mock_storage, "widgets", 1)

    @pytest.mark.asyncio
    async def test_reads_should_raise_under_raise_policy(self, mock_storage: AsyncMock) -> None:
        """Test the RAISE policy unifies reads with writes."""
        # Arrange
        registry = EntityRegistry(policy=UnknownCollectionPolicy.RAISE)

        # Act & Assert
        with pytest.raises(UnknownCollection):
            await registry.get_collection(mock_storage, "widgets")
        with pytest.raises(UnknownCollection):
            await registry.get_document(mock_storage, "widgets", 1)


class TestRegistryWrites:
    """Test suite for write-path validation."""

    @pytest.mark.asyncio
    async def test_create_should_reject_undeclared_column(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test payload keys are validated against the table's columns."""
        # Act & Assert
        with pytest.raises(InvalidField):
            await registry.create_document(mock_storage, "satellites", {"wingspan": 12})
        mock_storage.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_command_should_force_pending_status(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test new commands always start Pending."""
        # Arrange
        mock_storage.execute.side_effect = [
            WriteResult(insert_id=5, affected_rows=1),
            [{"id": 5, "status": "Pending"}],
        ]

        # Act
        row = await registry.create_document(
            mock_storage,
            "commands",
            {"satellite_id": 1, "command_type": "Restart System", "status": "Completed"},
        )

        # Assert
        insert_call = mock_storage.execute.await_args_list[0]
        assert insert_call.args[1]["v_status"] == "Pending"
        assert row == {"id": 5, "status": "Pending"}

    @pytest.mark.asyncio
    async def test_telemetry_should_be_append_only(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test telemetry cannot be updated or deleted through the registry."""
        # Act & Assert
        with pytest.raises(ImmutableCollection):
            await registry.update_document(mock_storage, "telemetry", 1, {"data": {}})
        with pytest.raises(ImmutableCollection):
            await registry.delete_document(mock_storage, "telemetry", 1)

    @pytest.mark.asyncio
    async def test_delete_should_report_missing_row(
        self, mock_storage: AsyncMock, registry: EntityRegistry
    ) -> None:
        """Test delete returns False when nothing was removed."""
        # Arrange
        mock_storage.execute.return_value = WriteResult(affected_rows=0)

        # Act
        deleted = await registry.delete_document(mock_storage, "missions", 42)

        # Assert
        assert deleted is False
