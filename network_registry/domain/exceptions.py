"""
Domain Exceptions
=================

Errors raised by the domain model and by repository implementations.

The application layer translates these into use case errors; nothing in
this module knows about HTTP.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field rule of the Network aggregate was violated."""
    
    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class InvalidNetworkIdError(DomainException):
    """A value could not be parsed as a network identifier."""
    
    def __init__(self, value: str):
        super().__init__(f"Invalid network id: '{value}'")
        self.value = value


class RepositoryError(Exception):
    """
    Persistence failure (connectivity, mapping, unexpected constraint).
    
    The message may contain store internals; it is logged, never returned
    to API callers.
    """


class DuplicateChainIdError(RepositoryError):
    """The store rejected a write because the chain id is already taken."""
    
    def __init__(self, chain_id: int):
        super().__init__(f"Network with chain_id {chain_id} already exists")
        self.chain_id = chain_id
