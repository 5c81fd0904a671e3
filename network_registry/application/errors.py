"""
Use Case Errors
===============

Error taxonomy of the application layer and its mapping to API error codes
and HTTP status codes.

| Error                 | Code             | Status |
|-----------------------|------------------|--------|
| ValidationFailedError | VALIDATION_ERROR | 400    |
| InvalidIdError        | INVALID_UUID     | 400    |
| UnauthorizedError     | UNAUTHORIZED     | 401    |
| ForbiddenError        | FORBIDDEN        | 403    |
| NotFoundError         | NOT_FOUND        | 404    |
| ConflictError         | CONFLICT         | 409    |
| InternalError         | INTERNAL_ERROR   | 500    |
"""
import logging
from typing import Dict, List, Optional

from network_registry.domain.exceptions import (
    DuplicateChainIdError,
    InvalidNetworkIdError,
    RepositoryError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


class UseCaseError(Exception):
    """Base class for errors returned by use cases."""
    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationFailedError(UseCaseError):
    """Input was malformed; detected before anything was persisted."""
    code = "VALIDATION_ERROR"
    status_code = 400

    @classmethod
    def from_domain(cls, error: ValidationError) -> "ValidationFailedError":
        return cls(
            f"Validation failed: {error.message}",
            details=[{"field": error.field, "message": error.message}],
        )


class InvalidIdError(UseCaseError):
    """A path identifier is not a valid network id."""
    code = "INVALID_UUID"
    status_code = 400


class UnauthorizedError(UseCaseError):
    """Missing, malformed, invalid or expired credentials."""
    code = "UNAUTHORIZED"
    status_code = 401


class ForbiddenError(UseCaseError):
    """Credentials are valid but do not allow the operation."""
    code = "FORBIDDEN"
    status_code = 403


class NotFoundError(UseCaseError):
    """The requested network does not exist."""
    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} with id '{resource_id}' not found")
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(UseCaseError):
    """The chain id is already used by another network."""
    code = "CONFLICT"
    status_code = 409

    @classmethod
    def chain_id_taken(cls, chain_id: int) -> "ConflictError":
        return cls(f"Network with chain_id {chain_id} already exists")


class InternalError(UseCaseError):
    """Persistence or unexpected failure. Details are logged, not returned."""
    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE):
        super().__init__(message)


def to_use_case_error(error: Exception) -> UseCaseError:
    """
    Translate a domain or repository exception into a use case error.

    Args:
        error: Exception raised below the application layer

    Returns:
        The matching UseCaseError (use case errors are returned unchanged)
    """
    if isinstance(error, UseCaseError):
        return error
    if isinstance(error, ValidationError):
        return ValidationFailedError.from_domain(error)
    if isinstance(error, InvalidNetworkIdError):
        return InvalidIdError(str(error))
    if isinstance(error, DuplicateChainIdError):
        return ConflictError.chain_id_taken(error.chain_id)
    if isinstance(error, RepositoryError):
        logger.error("Repository failure: %s", error)
        return InternalError()
    logger.exception("Unexpected error", exc_info=error)
    return InternalError()
