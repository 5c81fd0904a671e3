from typing import TYPE_CHECKING
from ...domain.repositories.network_repository import NetworkRepository
from ...application.services.network_service import NetworkService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class NetworkProvider:
    """Network service provider - registers network-related services"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register network service.
        Service is created with repository from container.
        """
        container.register_singleton(
            NetworkService,
            NetworkService(
                network_repository=container.get(NetworkRepository)
            )
        )
