"""
Dependency Providers
====================

FastAPI dependencies resolving services from the application's DI container.
"""
from fastapi import Request

from network_registry.application.errors import InvalidIdError
from network_registry.application.services.network_service import NetworkService
from network_registry.di.container import DIContainer
from network_registry.domain.exceptions import InvalidNetworkIdError
from network_registry.domain.models.network import NetworkId


def get_container_from_request(request: Request) -> DIContainer:
    """
    Get the DI container attached to the running application.
    
    Returns:
        DIContainer instance
    """
    return request.app.state.container


def get_network_service(request: Request) -> NetworkService:
    """
    Get network service instance (singleton).
    
    Returns:
        NetworkService instance
    """
    return get_container_from_request(request).get(NetworkService)


def parse_network_id(network_id: str) -> NetworkId:
    """
    Parse the `{network_id}` path parameter.
    
    Raises:
        InvalidIdError: If the value is not a UUID
    """
    try:
        return NetworkId.parse(network_id)
    except InvalidNetworkIdError as e:
        raise InvalidIdError(str(e)) from e
