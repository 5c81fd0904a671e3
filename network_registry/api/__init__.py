"""
API Package
===========

HTTP boundary of the registry.
"""
