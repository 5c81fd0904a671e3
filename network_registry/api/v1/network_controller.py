"""
Network Controller
==================

FastAPI controller for network registry endpoints.
All routes require a valid bearer token.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from network_registry.api.v1.dependencies import get_network_service, parse_network_id
from network_registry.api.v1.security import get_current_user
from network_registry.application.dto.network_dto import (
    CreateNetworkRequest,
    ErrorResponse,
    NetworkResponse,
    PatchNetworkRequest,
    UpdateNetworkRequest,
)
from network_registry.application.services.network_service import NetworkService
from network_registry.domain.models.network import NetworkId

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Validation error"},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Missing or invalid token"},
}
NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Network not found"}}
CONFLICT_RESPONSE = {status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "chain_id already exists"}}

router = APIRouter(tags=["networks"], dependencies=[Depends(get_current_user)])


@router.post(
    "",
    response_model=NetworkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**ERROR_RESPONSES, **CONFLICT_RESPONSE},
    summary="Create a network",
    description="Register a new blockchain network. The chain id must not be used by any network, active or deleted.",
)
async def create_network(
    request: CreateNetworkRequest,
    service: NetworkService = Depends(get_network_service),
) -> NetworkResponse:
    """Create a network."""
    network = await service.create_network(request.to_domain())
    return NetworkResponse.from_entity(network)


@router.get(
    "",
    response_model=List[NetworkResponse],
    responses={status.HTTP_401_UNAUTHORIZED: ERROR_RESPONSES[status.HTTP_401_UNAUTHORIZED]},
    summary="List active networks",
    description="Get all active networks, sorted by name.",
)
async def list_networks(
    service: NetworkService = Depends(get_network_service),
) -> List[NetworkResponse]:
    """List active networks."""
    networks = await service.list_active_networks()
    return [NetworkResponse.from_entity(network) for network in networks]


@router.get(
    "/{network_id}",
    response_model=NetworkResponse,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
    summary="Get network by ID",
    description="Get details of a specific network, including deleted ones.",
)
async def get_network(
    network_id: NetworkId = Depends(parse_network_id),
    service: NetworkService = Depends(get_network_service),
) -> NetworkResponse:
    """Get a specific network by its ID."""
    network = await service.get_network(network_id)
    return NetworkResponse.from_entity(network)


@router.put(
    "/{network_id}",
    response_model=NetworkResponse,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE},
    summary="Replace a network",
    description="Full update of a network. The active flag is kept as stored.",
)
async def update_network(
    request: UpdateNetworkRequest,
    network_id: NetworkId = Depends(parse_network_id),
    service: NetworkService = Depends(get_network_service),
) -> NetworkResponse:
    """Full update of a network."""
    network = await service.update_network(network_id, request.to_domain())
    return NetworkResponse.from_entity(network)


@router.patch(
    "/{network_id}",
    response_model=NetworkResponse,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE},
    summary="Update some fields of a network",
    description="Partial update of a network. Only provided fields change; `active` may be toggled.",
)
async def patch_network(
    request: PatchNetworkRequest,
    network_id: NetworkId = Depends(parse_network_id),
    service: NetworkService = Depends(get_network_service),
) -> NetworkResponse:
    """Partial update of a network."""
    network = await service.patch_network(network_id, request.to_domain())
    return NetworkResponse.from_entity(network)


@router.delete(
    "/{network_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND_RESPONSE, status.HTTP_401_UNAUTHORIZED: ERROR_RESPONSES[status.HTTP_401_UNAUTHORIZED]},
    summary="Delete a network",
    description="Soft delete: the network is marked inactive and disappears from the active list.",
)
async def delete_network(
    network_id: NetworkId = Depends(parse_network_id),
    service: NetworkService = Depends(get_network_service),
) -> Response:
    """Soft delete a network."""
    await service.delete_network(network_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
