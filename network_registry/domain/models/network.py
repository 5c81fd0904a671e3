"""
Network Model
=============

Domain model representing a blockchain network in the registry.
This is a pure domain object with no infrastructure dependencies.
"""
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from network_registry.domain.exceptions import InvalidNetworkIdError
from network_registry.domain.validation import validate_network_fields
from network_registry.utils.datetime_utils import later_than, now


@dataclass(frozen=True)
class NetworkId:
    """Unique, immutable identifier of a Network (random UUID)."""
    value: uuid.UUID

    @classmethod
    def new(cls) -> "NetworkId":
        """Generate a fresh random identifier."""
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls, text: str) -> "NetworkId":
        """
        Parse an identifier from its string form.

        Raises:
            InvalidNetworkIdError: If the text is not a valid UUID
        """
        try:
            return cls(uuid.UUID(str(text)))
        except (ValueError, TypeError, AttributeError):
            raise InvalidNetworkIdError(text) from None

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CreateNetworkData:
    """Data required to create a new Network."""
    chain_id: int
    name: str
    rpc_url: str
    test_net: bool
    block_explorer_url: str
    fee_multiplier: Decimal
    gas_limit_multiplier: Decimal
    default_signer_address: str
    other_rpc_urls: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateNetworkData:
    """
    Sparse set of field values for updating a Network.

    None means "not provided": the current value is kept.
    """
    chain_id: Optional[int] = None
    name: Optional[str] = None
    rpc_url: Optional[str] = None
    other_rpc_urls: Optional[List[str]] = None
    test_net: Optional[bool] = None
    block_explorer_url: Optional[str] = None
    fee_multiplier: Optional[Decimal] = None
    gas_limit_multiplier: Optional[Decimal] = None
    default_signer_address: Optional[str] = None
    active: Optional[bool] = None

    def is_empty(self) -> bool:
        """Check if no field was provided."""
        return all(value is None for value in self.__dict__.values())


@dataclass(frozen=True)
class Network:
    """
    Network domain model.

    The aggregate root of the registry. Every instance reachable through the
    public constructors satisfies the field rules in domain.validation;
    `restore` is the one exception and exists only for persisted records.

    Instances are immutable: updates and deactivation return new objects.
    `id` and `created_at` never change after creation, `updated_at` moves
    forward on every mutation.
    """
    id: NetworkId
    chain_id: int
    name: str
    rpc_url: str
    other_rpc_urls: Tuple[str, ...]
    test_net: bool
    block_explorer_url: str
    fee_multiplier: Decimal
    gas_limit_multiplier: Decimal
    active: bool
    default_signer_address: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(cls, data: CreateNetworkData) -> "Network":
        """
        Build a new, validated, active network.

        Args:
            data: Creation data

        Returns:
            Network with a fresh id and created_at == updated_at

        Raises:
            ValidationError: For the first field rule that fails
        """
        validate_network_fields(
            chain_id=data.chain_id,
            name=data.name,
            rpc_url=data.rpc_url,
            other_rpc_urls=data.other_rpc_urls,
            block_explorer_url=data.block_explorer_url,
            fee_multiplier=data.fee_multiplier,
            gas_limit_multiplier=data.gas_limit_multiplier,
            default_signer_address=data.default_signer_address,
        )
        timestamp = now()
        return cls(
            id=NetworkId.new(),
            chain_id=data.chain_id,
            name=data.name,
            rpc_url=data.rpc_url,
            other_rpc_urls=tuple(data.other_rpc_urls),
            test_net=data.test_net,
            block_explorer_url=data.block_explorer_url,
            fee_multiplier=data.fee_multiplier,
            gas_limit_multiplier=data.gas_limit_multiplier,
            active=True,
            default_signer_address=data.default_signer_address,
            created_at=timestamp,
            updated_at=timestamp,
        )

    @classmethod
    def restore(
        cls,
        id: NetworkId,
        chain_id: int,
        name: str,
        rpc_url: str,
        other_rpc_urls: List[str],
        test_net: bool,
        block_explorer_url: str,
        fee_multiplier: Decimal,
        gas_limit_multiplier: Decimal,
        active: bool,
        default_signer_address: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Network":
        """Rebuild a network from persisted data (no validation)."""
        return cls(
            id=id,
            chain_id=chain_id,
            name=name,
            rpc_url=rpc_url,
            other_rpc_urls=tuple(other_rpc_urls),
            test_net=test_net,
            block_explorer_url=block_explorer_url,
            fee_multiplier=fee_multiplier,
            gas_limit_multiplier=gas_limit_multiplier,
            active=active,
            default_signer_address=default_signer_address,
            created_at=created_at,
            updated_at=updated_at,
        )

    def with_updates(self, data: UpdateNetworkData) -> "Network":
        """
        Overlay the provided fields onto this network.

        Absent fields keep their current value. `id` and `created_at` are
        never overwritten and `updated_at` always moves forward, even if no
        field changed. The result is not validated here; call `validate()`.
        """
        changes = {
            name: value
            for name, value in data.__dict__.items()
            if value is not None
        }
        if "other_rpc_urls" in changes:
            changes["other_rpc_urls"] = tuple(changes["other_rpc_urls"])
        return replace(self, updated_at=later_than(self.updated_at), **changes)

    def deactivate(self) -> "Network":
        """Mark the network as inactive (soft delete)."""
        return replace(self, active=False, updated_at=later_than(self.updated_at))

    def validate(self) -> None:
        """
        Re-check every field rule on this network.

        Raises:
            ValidationError: For the first field rule that fails
        """
        validate_network_fields(
            chain_id=self.chain_id,
            name=self.name,
            rpc_url=self.rpc_url,
            other_rpc_urls=self.other_rpc_urls,
            block_explorer_url=self.block_explorer_url,
            fee_multiplier=self.fee_multiplier,
            gas_limit_multiplier=self.gas_limit_multiplier,
            default_signer_address=self.default_signer_address,
        )

    def is_active(self) -> bool:
        """Check if network is active."""
        return self.active
