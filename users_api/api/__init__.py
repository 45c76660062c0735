"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- v1: FastAPI route handlers
- dependencies: resolving services for route handlers
"""
