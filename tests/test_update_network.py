"""Tests for the full and partial update use cases."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from network_registry.application.errors import ConflictError, NotFoundError, ValidationFailedError
from network_registry.application.use_cases.network import (
    PartialUpdateNetworkUseCase,
    UpdateNetworkUseCase,
)
from network_registry.domain.exceptions import DuplicateChainIdError
from network_registry.domain.models.network import NetworkId, UpdateNetworkData


@pytest.fixture
def mock_repository(network):
    """Create a mock repository holding one network."""
    repository = MagicMock()
    repository.find_by_id = AsyncMock(return_value=network)
    repository.exists_by_chain_id = AsyncMock(return_value=False)
    repository.update = AsyncMock(side_effect=lambda updated: updated)
    return repository


@pytest.fixture(params=[UpdateNetworkUseCase, PartialUpdateNetworkUseCase], ids=["put", "patch"])
def use_case_class(request):
    return request.param


class TestUpdateNetworkCommon:
    """Behaviour shared by PUT and PATCH."""

    @pytest.mark.asyncio
    async def test_missing_network_is_not_found(self, mock_repository, use_case_class):
        mock_repository.find_by_id = AsyncMock(return_value=None)
        network_id = NetworkId.new()

        with pytest.raises(NotFoundError) as exc_info:
            await use_case_class(mock_repository).execute(network_id, UpdateNetworkData(chain_id=2))

        assert exc_info.value.message == f"Network with id '{network_id}' not found"
        mock_repository.exists_by_chain_id.assert_not_awaited()
        mock_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unchanged_chain_id_skips_existence_check(self, mock_repository, use_case_class, network):
        data = UpdateNetworkData(chain_id=network.chain_id, name="Ethereum")

        updated = await use_case_class(mock_repository).execute(network.id, data)

        mock_repository.exists_by_chain_id.assert_not_awaited()
        assert updated.name == "Ethereum"

    @pytest.mark.asyncio
    async def test_new_chain_id_is_checked_excluding_self(self, mock_repository, use_case_class, network):
        updated = await use_case_class(mock_repository).execute(network.id, UpdateNetworkData(chain_id=10))

        mock_repository.exists_by_chain_id.assert_awaited_once_with(10, exclude_id=network.id)
        assert updated.chain_id == 10

    @pytest.mark.asyncio
    async def test_taken_chain_id_is_a_conflict(self, mock_repository, use_case_class, network):
        mock_repository.exists_by_chain_id = AsyncMock(return_value=True)

        with pytest.raises(ConflictError):
            await use_case_class(mock_repository).execute(network.id, UpdateNetworkData(chain_id=10))

        mock_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unique_index_rejection_is_a_conflict(self, mock_repository, use_case_class, network):
        mock_repository.update = AsyncMock(side_effect=DuplicateChainIdError(10))

        with pytest.raises(ConflictError):
            await use_case_class(mock_repository).execute(network.id, UpdateNetworkData(chain_id=10))

    @pytest.mark.asyncio
    async def test_network_deleted_meanwhile_is_not_found(self, mock_repository, use_case_class, network):
        mock_repository.update = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError):
            await use_case_class(mock_repository).execute(network.id, UpdateNetworkData(name="Gone"))

    @pytest.mark.asyncio
    async def test_merged_network_is_validated(self, mock_repository, use_case_class, network):
        with pytest.raises(ValidationFailedError) as exc_info:
            await use_case_class(mock_repository).execute(
                network.id, UpdateNetworkData(block_explorer_url="etherscan.io")
            )

        assert exc_info.value.details[0]["field"] == "block_explorer_url"
        mock_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_identity_and_creation_time_are_kept(self, mock_repository, use_case_class, network):
        updated = await use_case_class(mock_repository).execute(network.id, UpdateNetworkData(name="Ethereum"))

        assert updated.id == network.id
        assert updated.created_at == network.created_at
        assert updated.updated_at > network.updated_at


class TestUpdateNetworkUseCase:
    """Full update cannot change the active flag."""

    @pytest.mark.asyncio
    async def test_active_is_ignored(self, mock_repository, network):
        updated = await UpdateNetworkUseCase(mock_repository).execute(
            network.id, UpdateNetworkData(name="Ethereum", active=False)
        )

        assert updated.active is True

    @pytest.mark.asyncio
    async def test_deleted_network_stays_deleted(self, mock_repository, network):
        mock_repository.find_by_id = AsyncMock(return_value=network.deactivate())

        updated = await UpdateNetworkUseCase(mock_repository).execute(
            network.id, UpdateNetworkData(name="Ethereum", active=True)
        )

        assert updated.active is False


class TestPartialUpdateNetworkUseCase:
    """Partial update may toggle active."""

    @pytest.mark.asyncio
    async def test_can_deactivate(self, mock_repository, network):
        updated = await PartialUpdateNetworkUseCase(mock_repository).execute(
            network.id, UpdateNetworkData(active=False)
        )

        assert updated.active is False
        assert updated.name == network.name

    @pytest.mark.asyncio
    async def test_can_reactivate(self, mock_repository, network):
        mock_repository.find_by_id = AsyncMock(return_value=network.deactivate())

        updated = await PartialUpdateNetworkUseCase(mock_repository).execute(
            network.id, UpdateNetworkData(active=True)
        )

        assert updated.active is True

    @pytest.mark.asyncio
    async def test_empty_patch_only_refreshes_updated_at(self, mock_repository, network):
        updated = await PartialUpdateNetworkUseCase(mock_repository).execute(network.id, UpdateNetworkData())

        assert updated.updated_at > network.updated_at
        assert updated.name == network.name
        assert updated.chain_id == network.chain_id
        assert updated.other_rpc_urls == network.other_rpc_urls
        mock_repository.exists_by_chain_id.assert_not_awaited()
