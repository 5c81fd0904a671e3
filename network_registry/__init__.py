"""
Network Registry
================

CRUD registry service for blockchain network metadata.
"""
__version__ = "1.0.0"
