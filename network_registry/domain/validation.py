"""
Network Validation Rules
========================

Field rules for the Network aggregate, checked in a fixed order.

Validation stops at the first violated rule. The same functions back the
entity constructor, the post-merge check and the API request models, so a
network built directly and one built from a request are held to identical
rules.
"""
import re
from decimal import Decimal
from typing import Sequence

from network_registry.domain.constants.network_fields import NetworkFields
from network_registry.domain.exceptions import ValidationError

MIN_CHAIN_ID = 1
# Signed 32-bit range
MAX_CHAIN_ID = 2**31 - 1
MAX_NAME_LENGTH = 100
MAX_URL_LENGTH = 500
MAX_OTHER_RPC_URLS = 10
SIGNER_ADDRESS_LENGTH = 42

ETHEREUM_ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")


def check_chain_id(chain_id: int) -> None:
    if isinstance(chain_id, bool) or not isinstance(chain_id, int):
        raise ValidationError(NetworkFields.CHAIN_ID, "chain_id must be an integer")
    if chain_id < MIN_CHAIN_ID:
        raise ValidationError(NetworkFields.CHAIN_ID, f"chain_id must be at least {MIN_CHAIN_ID}")
    if chain_id > MAX_CHAIN_ID:
        raise ValidationError(NetworkFields.CHAIN_ID, f"chain_id must be at most {MAX_CHAIN_ID}")


def check_name(name: str) -> None:
    if not name or len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            NetworkFields.NAME,
            f"name must be between 1 and {MAX_NAME_LENGTH} characters",
        )


def check_url(field: str, url: str) -> None:
    """
    Check a URL's length and shape.
    
    The URL must start with http:// or https:// and be followed by a
    non-empty host.
    """
    if len(url) > MAX_URL_LENGTH:
        raise ValidationError(field, f"{field} must be at most {MAX_URL_LENGTH} characters")
    
    if url.startswith("https://"):
        rest = url[len("https://"):]
    elif url.startswith("http://"):
        rest = url[len("http://"):]
    else:
        raise ValidationError(field, "URL must start with http:// or https://")
    
    if not rest or rest.startswith("/"):
        raise ValidationError(field, "URL must include a valid host")


def check_other_rpc_urls(urls: Sequence[str]) -> None:
    field = NetworkFields.OTHER_RPC_URLS
    if len(urls) > MAX_OTHER_RPC_URLS:
        raise ValidationError(field, f"other_rpc_urls can have at most {MAX_OTHER_RPC_URLS} items")
    for url in urls:
        if len(url) > MAX_URL_LENGTH:
            raise ValidationError(field, f"Each URL must be at most {MAX_URL_LENGTH} characters")
        check_url(field, url)


def check_multiplier(field: str, value: Decimal) -> None:
    if not isinstance(value, Decimal):
        raise ValidationError(field, f"{field} must be a decimal value")
    if not value.is_finite():
        raise ValidationError(field, "Value must be a finite number")
    if value < 0:
        raise ValidationError(field, f"{field} must be at least 0")


def check_signer_address(address: str) -> None:
    field = NetworkFields.DEFAULT_SIGNER_ADDRESS
    if len(address) != SIGNER_ADDRESS_LENGTH:
        raise ValidationError(
            field,
            f"default_signer_address must be exactly {SIGNER_ADDRESS_LENGTH} characters",
        )
    if not ETHEREUM_ADDRESS_PATTERN.match(address):
        raise ValidationError(
            field,
            "Invalid Ethereum address format (must be 0x followed by 40 hex characters)",
        )


def validate_network_fields(
    chain_id: int,
    name: str,
    rpc_url: str,
    other_rpc_urls: Sequence[str],
    block_explorer_url: str,
    fee_multiplier: Decimal,
    gas_limit_multiplier: Decimal,
    default_signer_address: str,
) -> None:
    """
    Run every Network field rule in order.
    
    Raises:
        ValidationError: For the first rule that fails
    """
    check_chain_id(chain_id)
    check_name(name)
    check_url(NetworkFields.RPC_URL, rpc_url)
    check_other_rpc_urls(other_rpc_urls)
    check_url(NetworkFields.BLOCK_EXPLORER_URL, block_explorer_url)
    check_multiplier(NetworkFields.FEE_MULTIPLIER, fee_multiplier)
    check_multiplier(NetworkFields.GAS_LIMIT_MULTIPLIER, gas_limit_multiplier)
    check_signer_address(default_signer_address)
