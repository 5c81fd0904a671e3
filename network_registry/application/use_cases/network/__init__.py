"""
Network Use Cases
=================

One class per operation on the Network aggregate.
"""
from .create_network import CreateNetworkUseCase
from .delete_network import DeleteNetworkUseCase
from .get_active_networks import GetActiveNetworksUseCase
from .get_network_by_id import GetNetworkByIdUseCase
from .partial_update_network import PartialUpdateNetworkUseCase
from .update_network import UpdateNetworkUseCase

__all__ = [
    "CreateNetworkUseCase",
    "DeleteNetworkUseCase",
    "GetActiveNetworksUseCase",
    "GetNetworkByIdUseCase",
    "PartialUpdateNetworkUseCase",
    "UpdateNetworkUseCase",
]
