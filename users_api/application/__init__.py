"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create user, list users)
- Services: Application services that coordinate the use cases
- DTOs: Pydantic request/response models
"""
