"""
Bearer Authentication
=====================

Verifies the JWT sent in the Authorization header and extracts its claims.

Tokens must be signed with the configured secret and algorithm and carry an
`exp` claim. Failure reasons are logged but never returned to the caller.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from network_registry.application.errors import UnauthorizedError
from network_registry.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="JWT bearer token")


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity extracted from a verified token."""
    id: str
    email: str
    role: str


def decode_token(token: str, settings: Settings) -> AuthenticatedUser:
    """
    Verify a JWT and build the authenticated user from its claims.
    
    Args:
        token: Encoded JWT
        settings: Settings holding the secret, algorithm and leeway
    
    Returns:
        AuthenticatedUser built from the sub, email and role claims
    
    Raises:
        UnauthorizedError: If the token is invalid, expired or incomplete
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=settings.jwt_leeway_seconds,
            options={"require": ["exp", "sub"]},
        )
    except jwt.PyJWTError as e:
        logger.info("Rejected bearer token: %s", e)
        raise UnauthorizedError("Invalid or expired token") from None
    
    return AuthenticatedUser(
        id=str(claims["sub"]),
        email=str(claims.get("email", "")),
        role=str(claims.get("role", "")),
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthenticatedUser:
    """FastAPI dependency requiring a valid bearer token."""
    if credentials is None:
        raise UnauthorizedError("Missing or invalid Authorization header")
    if credentials.scheme.lower() != "bearer":
        raise UnauthorizedError("Invalid Authorization header format")
    return decode_token(credentials.credentials, get_settings())
