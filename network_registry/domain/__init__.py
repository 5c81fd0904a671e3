"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: The Network aggregate and its identifier
- Validation: Field rules shared by the entity and the API layer
- Repository Interfaces: Abstract contracts for data access
"""
