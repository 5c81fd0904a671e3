"""
Application Layer
=================

Use cases and services that orchestrate the domain model and repositories.
"""
