"""
Dependency Getters
==================

FastAPI dependencies resolving services from the container attached to
the running application.
"""
from fastapi import Request

from users_api.application.services.user_service import UserService
from users_api.di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    Get the DI container of the application serving this request.

    Returns:
        Container stored on app.state by create_application
    """
    return request.app.state.container


def get_user_service(request: Request) -> UserService:
    """
    Get user service instance (singleton).

    Returns:
        UserService instance
    """
    return get_container(request).get(UserService)
