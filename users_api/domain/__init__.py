"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: the User record
- Validation: required-field rules for new users
- Repository Interfaces: Abstract contracts for data access
"""
