"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from network_registry import __version__
from network_registry.api.error_handlers import register_exception_handlers
from network_registry.api.middleware import REQUEST_ID_HEADER, RequestIdMiddleware
from network_registry.api.v1 import network_router
from network_registry.core.config import get_settings
from network_registry.core.logging import configure_logging
from network_registry.di.container import DIContainer, get_container
from network_registry.domain.repositories.network_repository import NetworkRepository

logger = logging.getLogger(__name__)

SERVICE_NAME = "Blockchain Network Registry API"


@asynccontextmanager
async def lifespan(application: FastAPI):
    """
    Startup: make sure the store has its indexes (unique chain_id).
    Shutdown: close the database connection pool, if one was opened.
    """
    container: DIContainer = application.state.container
    await container.get(NetworkRepository).ensure_indexes()
    logger.info("Network store indexes ensured")

    yield

    if container.has("mongo_client"):
        await container.get("mongo_client").close()
    logger.info("Network registry stopped")


def create_application(container: Optional[DIContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Settings validation and logging configuration
    - CORS and request id middleware
    - Error handlers producing the JSON error envelope
    - API route registration

    Args:
        container: DI container to use; the global container by default

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    settings.validate()
    configure_logging(settings.log_level)

    application = FastAPI(
        title=SERVICE_NAME,
        description="Registry of blockchain networks: chain id, RPC endpoints, explorer, fee and gas multipliers, signer",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container or get_container()

    # Middleware added last runs first: request id wraps CORS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )
    application.add_middleware(RequestIdMiddleware)

    register_exception_handlers(application)

    # Register API routers
    application.include_router(network_router, prefix="/networks")

    @application.get("/")
    async def root():
        """Root endpoint - service information."""
        return {
            "status": "running",
            "service": SERVICE_NAME,
            "version": __version__,
            "docs": "/docs",
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "network_registry.main:create_application",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
