"""Tests for the Network aggregate."""

import dataclasses
import uuid
from decimal import Decimal

import pytest

from network_registry.domain.exceptions import InvalidNetworkIdError, ValidationError
from network_registry.domain.models.network import Network, NetworkId, UpdateNetworkData


class TestNetworkId:
    """Test identifier generation and parsing."""

    def test_new_ids_are_unique(self):
        assert NetworkId.new() != NetworkId.new()

    def test_parse_round_trips_string_form(self):
        network_id = NetworkId.new()
        assert NetworkId.parse(str(network_id)) == network_id

    def test_parse_accepts_uppercase(self):
        value = uuid.uuid4()
        assert NetworkId.parse(str(value).upper()).value == value

    @pytest.mark.parametrize("text", ["", "not-a-uuid", "1234", "550e8400-e29b-41d4-a716"])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(InvalidNetworkIdError) as exc_info:
            NetworkId.parse(text)
        assert exc_info.value.value == text


class TestNetworkCreate:
    """Test construction of new networks."""

    def test_valid_data_creates_active_network(self, create_data):
        network = Network.create(create_data)

        assert network.active is True
        assert network.is_active()
        assert network.created_at == network.updated_at
        assert network.chain_id == 1
        assert network.name == "Ethereum Mainnet"
        assert network.other_rpc_urls == ("https://eth.llamarpc.com",)
        assert network.fee_multiplier == Decimal("1.0")
        assert network.gas_limit_multiplier == Decimal("1.2")

    def test_each_network_gets_a_fresh_id(self, create_data):
        assert Network.create(create_data).id != Network.create(create_data).id

    def test_timestamps_are_timezone_aware(self, network):
        assert network.created_at.tzinfo is not None

    @pytest.mark.parametrize(
        "changes, field",
        [
            ({"chain_id": 0}, "chain_id"),
            ({"chain_id": -5}, "chain_id"),
            ({"chain_id": 2**64}, "chain_id"),
            ({"name": ""}, "name"),
            ({"name": "x" * 101}, "name"),
            ({"rpc_url": "ftp://mainnet.infura.io"}, "rpc_url"),
            ({"block_explorer_url": "https://"}, "block_explorer_url"),
            ({"other_rpc_urls": ["wss://node"]}, "other_rpc_urls"),
            ({"fee_multiplier": Decimal("-0.1")}, "fee_multiplier"),
            ({"gas_limit_multiplier": Decimal("NaN")}, "gas_limit_multiplier"),
            ({"default_signer_address": "0x742d35Cc"}, "default_signer_address"),
        ],
    )
    def test_invalid_field_is_rejected(self, create_data, changes, field):
        with pytest.raises(ValidationError) as exc_info:
            Network.create(dataclasses.replace(create_data, **changes))
        assert exc_info.value.field == field

    def test_name_of_exactly_100_characters_is_accepted(self, create_data):
        network = Network.create(dataclasses.replace(create_data, name="n" * 100))
        assert len(network.name) == 100


class TestNetworkWithUpdates:
    """Test merge-update semantics."""

    def test_provided_fields_replace_current_values(self, network):
        updated = network.with_updates(UpdateNetworkData(name="Ethereum", chain_id=5))

        assert updated.name == "Ethereum"
        assert updated.chain_id == 5
        assert updated.rpc_url == network.rpc_url
        assert updated.fee_multiplier == network.fee_multiplier
        assert updated.default_signer_address == network.default_signer_address

    def test_identity_and_creation_time_are_kept(self, network):
        updated = network.with_updates(UpdateNetworkData(name="Ethereum"))

        assert updated.id == network.id
        assert updated.created_at == network.created_at
        assert updated.updated_at > network.updated_at

    def test_empty_update_only_moves_updated_at(self, network):
        data = UpdateNetworkData()
        assert data.is_empty()

        updated = network.with_updates(data)

        assert updated.updated_at > network.updated_at
        assert dataclasses.replace(updated, updated_at=network.updated_at) == network

    def test_other_rpc_urls_are_stored_as_tuple(self, network):
        updated = network.with_updates(UpdateNetworkData(other_rpc_urls=["https://a.example"]))
        assert updated.other_rpc_urls == ("https://a.example",)

    def test_can_toggle_active(self, network):
        assert network.with_updates(UpdateNetworkData(active=False)).active is False

    def test_merge_does_not_validate_until_asked(self, network):
        merged = network.with_updates(UpdateNetworkData(rpc_url="not-a-url"))

        with pytest.raises(ValidationError) as exc_info:
            merged.validate()
        assert exc_info.value.field == "rpc_url"

    def test_original_is_unchanged(self, network):
        network.with_updates(UpdateNetworkData(name="Other"))
        assert network.name == "Ethereum Mainnet"


class TestNetworkDeactivate:
    """Test soft delete on the entity."""

    def test_deactivate_returns_inactive_copy(self, network):
        inactive = network.deactivate()

        assert inactive.active is False
        assert not inactive.is_active()
        assert inactive.id == network.id
        assert inactive.updated_at > network.updated_at
        assert network.active is True


class TestNetworkRestore:
    """Test rebuilding persisted networks."""

    def test_restore_keeps_values_as_given(self, network):
        restored = Network.restore(
            id=network.id,
            chain_id=network.chain_id,
            name=network.name,
            rpc_url=network.rpc_url,
            other_rpc_urls=list(network.other_rpc_urls),
            test_net=network.test_net,
            block_explorer_url=network.block_explorer_url,
            fee_multiplier=network.fee_multiplier,
            gas_limit_multiplier=network.gas_limit_multiplier,
            active=False,
            default_signer_address=network.default_signer_address,
            created_at=network.created_at,
            updated_at=network.updated_at,
        )

        assert restored == dataclasses.replace(network, active=False)
