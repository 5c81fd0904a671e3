"""Pytest configuration and fixtures for network registry tests."""

import asyncio
import logging
import time
from decimal import Decimal
from typing import Dict, List, Optional

import jwt
import pytest
from fastapi.testclient import TestClient

from network_registry.core.config import reset_settings
from network_registry.di.container import DIContainer
from network_registry.domain.exceptions import DuplicateChainIdError
from network_registry.domain.models.network import CreateNetworkData, Network, NetworkId
from network_registry.domain.repositories.network_repository import NetworkRepository
from network_registry.main import create_application

TEST_JWT_SECRET = "test-secret-that-is-at-least-32-characters-long"
SIGNER_ADDRESS = "0x742d35Cc6634C0532925a3b844Bc9e7595f1dEaD"

SETTINGS_ENV_KEYS = (
    "APP_HOST",
    "APP_PORT",
    "ALLOWED_ORIGINS",
    "TIMEZONE",
    "LOG_LEVEL",
    "MONGO_URI",
    "DB_NAME",
    "MONGO_MIN_POOL_SIZE",
    "MONGO_MAX_POOL_SIZE",
    "NETWORKS_COLLECTION",
    "JWT_SECRET",
    "JWT_ALGORITHM",
    "JWT_LEEWAY_SECONDS",
)


class InMemoryNetworkRepository(NetworkRepository):
    """
    Dict-backed repository.

    Rejects a second network with the same chain_id the way the store's
    unique index does. Lookups yield to the event loop so concurrent use
    cases can interleave.
    """

    def __init__(self) -> None:
        self.networks: Dict[NetworkId, Network] = {}

    def _check_unique(self, network: Network) -> None:
        for other in self.networks.values():
            if other.chain_id == network.chain_id and other.id != network.id:
                raise DuplicateChainIdError(network.chain_id)

    async def find_by_id(self, network_id: NetworkId) -> Optional[Network]:
        return self.networks.get(network_id)

    async def find_by_chain_id(self, chain_id: int) -> Optional[Network]:
        return next((n for n in self.networks.values() if n.chain_id == chain_id), None)

    async def find_all_active(self) -> List[Network]:
        return sorted((n for n in self.networks.values() if n.active), key=lambda n: n.name)

    async def create(self, network: Network) -> Network:
        await asyncio.sleep(0)
        self._check_unique(network)
        self.networks[network.id] = network
        return network

    async def update(self, network: Network) -> Optional[Network]:
        if network.id not in self.networks:
            return None
        self._check_unique(network)
        self.networks[network.id] = network
        return network

    async def soft_delete(self, network_id: NetworkId) -> bool:
        network = self.networks.get(network_id)
        if network is None:
            return False
        self.networks[network_id] = network.deactivate()
        return True

    async def exists_by_chain_id(self, chain_id: int, exclude_id: Optional[NetworkId] = None) -> bool:
        await asyncio.sleep(0)
        return any(
            n.chain_id == chain_id and n.id != exclude_id
            for n in self.networks.values()
        )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear registry-related environment variables before each test."""
    for key in SETTINGS_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def create_data():
    """Valid creation data for Ethereum mainnet."""
    return CreateNetworkData(
        chain_id=1,
        name="Ethereum Mainnet",
        rpc_url="https://mainnet.infura.io",
        other_rpc_urls=["https://eth.llamarpc.com"],
        test_net=False,
        block_explorer_url="https://etherscan.io",
        fee_multiplier=Decimal("1.0"),
        gas_limit_multiplier=Decimal("1.2"),
        default_signer_address=SIGNER_ADDRESS,
    )


@pytest.fixture
def network(create_data):
    """A freshly created, active network."""
    return Network.create(create_data)


@pytest.fixture
def network_payload():
    """JSON body for POST /networks."""
    return {
        "chainId": 1,
        "name": "Ethereum Mainnet",
        "rpcUrl": "https://mainnet.infura.io",
        "otherRpcUrls": [],
        "testNet": False,
        "blockExplorerUrl": "https://etherscan.io",
        "feeMultiplier": 1.0,
        "gasLimitMultiplier": 1.2,
        "defaultSignerAddress": SIGNER_ADDRESS,
    }


@pytest.fixture
def repository():
    """Empty in-memory repository."""
    return InMemoryNetworkRepository()


@pytest.fixture
def token_factory():
    """Build signed tokens; claims and expiry can be overridden."""
    def make_token(secret: str = TEST_JWT_SECRET, expires_in: int = 3600, **claims) -> str:
        payload = {
            "sub": "user-1",
            "email": "admin@example.com",
            "role": "admin",
            "exp": int(time.time()) + expires_in,
        }
        payload.update(claims)
        return jwt.encode(payload, secret, algorithm="HS256")

    return make_token


@pytest.fixture
def auth_headers(token_factory):
    """Authorization header carrying a valid token."""
    return {"Authorization": f"Bearer {token_factory()}"}


@pytest.fixture
def application(repository):
    """FastAPI app wired to the in-memory repository."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield create_application(DIContainer(network_repository=repository))
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def anonymous_client(application):
    """Test client without credentials."""
    with TestClient(application) as test_client:
        yield test_client


@pytest.fixture
def client(application, auth_headers):
    """Test client sending a valid bearer token."""
    with TestClient(application, headers=auth_headers) as test_client:
        yield test_client

