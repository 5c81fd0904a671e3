"""
API v1 Package
===============

Version 1 API controllers.
"""
from .network_controller import router as network_router

__all__ = ["network_router"]
