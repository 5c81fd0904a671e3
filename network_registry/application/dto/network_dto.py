"""
Network DTO
===========

Pydantic models for network API requests and responses.

JSON field names are camelCase (chainId, rpcUrl, ...). Field rules reuse
the domain validation functions so requests are rejected with the same
messages the entity would produce.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from network_registry.domain import validation
from network_registry.domain.constants.network_fields import NetworkFields
from network_registry.domain.exceptions import ValidationError
from network_registry.domain.models.network import CreateNetworkData, Network, UpdateNetworkData
from network_registry.utils.datetime_utils import to_iso

NETWORK_EXAMPLE: Dict[str, Any] = {
    "chainId": 1,
    "name": "Ethereum Mainnet",
    "rpcUrl": "https://mainnet.infura.io/v3/YOUR-PROJECT-ID",
    "otherRpcUrls": ["https://eth.llamarpc.com"],
    "testNet": False,
    "blockExplorerUrl": "https://etherscan.io",
    "feeMultiplier": 1.0,
    "gasLimitMultiplier": 1.2,
    "defaultSignerAddress": "0x742d35Cc6634C0532925a3b844Bc9e7595f1dEaD",
}


def _run_rule(rule, *args) -> None:
    # Pydantic reports ValueError from validators as a field error
    try:
        rule(*args)
    except ValidationError as e:
        raise ValueError(e.message) from None


class _NetworkFieldsModel(BaseModel):
    """Shared configuration and field validators for request models."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("rpc_url", check_fields=False)
    @classmethod
    def _check_rpc_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            _run_rule(validation.check_url, NetworkFields.RPC_URL, value)
        return value

    @field_validator("block_explorer_url", check_fields=False)
    @classmethod
    def _check_block_explorer_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            _run_rule(validation.check_url, NetworkFields.BLOCK_EXPLORER_URL, value)
        return value

    @field_validator("other_rpc_urls", check_fields=False)
    @classmethod
    def _check_other_rpc_urls(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is not None:
            _run_rule(validation.check_other_rpc_urls, value)
        return value

    @field_validator("default_signer_address", check_fields=False)
    @classmethod
    def _check_default_signer_address(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            _run_rule(validation.check_signer_address, value)
        return value


class CreateNetworkRequest(_NetworkFieldsModel):
    """DTO for creating a network (POST)."""
    chain_id: int = Field(..., ge=validation.MIN_CHAIN_ID, le=validation.MAX_CHAIN_ID, description="EVM chain id, unique across the registry")
    name: str = Field(..., min_length=1, max_length=validation.MAX_NAME_LENGTH)
    rpc_url: str = Field(..., description="Primary RPC endpoint (http or https)")
    other_rpc_urls: List[str] = Field(default_factory=list, description="Fallback RPC endpoints")
    test_net: bool
    block_explorer_url: str
    fee_multiplier: Decimal = Field(..., ge=0, allow_inf_nan=False)
    gas_limit_multiplier: Decimal = Field(..., ge=0, allow_inf_nan=False)
    default_signer_address: str = Field(..., description="0x-prefixed 20-byte address")

    model_config = ConfigDict(json_schema_extra={"example": NETWORK_EXAMPLE})

    def to_domain(self) -> CreateNetworkData:
        return CreateNetworkData(
            chain_id=self.chain_id,
            name=self.name,
            rpc_url=self.rpc_url,
            other_rpc_urls=list(self.other_rpc_urls),
            test_net=self.test_net,
            block_explorer_url=self.block_explorer_url,
            fee_multiplier=self.fee_multiplier,
            gas_limit_multiplier=self.gas_limit_multiplier,
            default_signer_address=self.default_signer_address,
        )


class UpdateNetworkRequest(CreateNetworkRequest):
    """
    DTO for a full update (PUT).

    Same fields as creation; `active` is not accepted here.
    """

    def to_domain(self) -> UpdateNetworkData:
        return UpdateNetworkData(
            chain_id=self.chain_id,
            name=self.name,
            rpc_url=self.rpc_url,
            other_rpc_urls=list(self.other_rpc_urls),
            test_net=self.test_net,
            block_explorer_url=self.block_explorer_url,
            fee_multiplier=self.fee_multiplier,
            gas_limit_multiplier=self.gas_limit_multiplier,
            default_signer_address=self.default_signer_address,
        )


class PatchNetworkRequest(_NetworkFieldsModel):
    """DTO for a partial update (PATCH). Only provided fields are changed."""
    chain_id: Optional[int] = Field(None, ge=validation.MIN_CHAIN_ID, le=validation.MAX_CHAIN_ID)
    name: Optional[str] = Field(None, min_length=1, max_length=validation.MAX_NAME_LENGTH)
    rpc_url: Optional[str] = None
    other_rpc_urls: Optional[List[str]] = None
    test_net: Optional[bool] = None
    block_explorer_url: Optional[str] = None
    fee_multiplier: Optional[Decimal] = Field(None, ge=0, allow_inf_nan=False)
    gas_limit_multiplier: Optional[Decimal] = Field(None, ge=0, allow_inf_nan=False)
    default_signer_address: Optional[str] = None
    active: Optional[bool] = None

    model_config = ConfigDict(json_schema_extra={"example": {"name": "Ethereum", "active": False}})

    @field_validator("*")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # Omitted fields keep their default and never reach this validator
        if value is None:
            raise ValueError("Field cannot be null; omit it to keep the current value")
        return value

    def to_domain(self) -> UpdateNetworkData:
        return UpdateNetworkData(
            chain_id=self.chain_id,
            name=self.name,
            rpc_url=self.rpc_url,
            other_rpc_urls=list(self.other_rpc_urls) if self.other_rpc_urls is not None else None,
            test_net=self.test_net,
            block_explorer_url=self.block_explorer_url,
            fee_multiplier=self.fee_multiplier,
            gas_limit_multiplier=self.gas_limit_multiplier,
            default_signer_address=self.default_signer_address,
            active=self.active,
        )


class NetworkResponse(BaseModel):
    """DTO for network data."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    chain_id: int
    name: str
    rpc_url: str
    other_rpc_urls: List[str]
    test_net: bool
    block_explorer_url: str
    fee_multiplier: Decimal
    gas_limit_multiplier: Decimal
    active: bool
    default_signer_address: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("fee_multiplier", "gas_limit_multiplier")
    def _serialize_multiplier(self, value: Decimal) -> float:
        return float(value)

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime) -> Optional[str]:
        return to_iso(value)

    @classmethod
    def from_entity(cls, network: Network) -> "NetworkResponse":
        return cls(
            id=str(network.id),
            chain_id=network.chain_id,
            name=network.name,
            rpc_url=network.rpc_url,
            other_rpc_urls=list(network.other_rpc_urls),
            test_net=network.test_net,
            block_explorer_url=network.block_explorer_url,
            fee_multiplier=network.fee_multiplier,
            gas_limit_multiplier=network.gas_limit_multiplier,
            active=network.active,
            default_signer_address=network.default_signer_address,
            created_at=network.created_at,
            updated_at=network.updated_at,
        )


class FieldErrorDetail(BaseModel):
    """Field-level error for validation errors."""
    field: str
    message: str


class ErrorDetail(BaseModel):
    """Error code, message and optional field details."""
    code: str
    message: str
    details: Optional[List[FieldErrorDetail]] = None


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error: ErrorDetail
    request_id: Optional[str] = None
    timestamp: str
