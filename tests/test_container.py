"""Tests for the dependency injection container."""

import pytest

from users_api.application.services.user_service import UserService
from users_api.di.base_container import BaseContainer
from users_api.di.container import DIContainer
from users_api.di.providers import MONGO_CONNECTION
from users_api.domain.repositories.user_repository import UserRepository
from users_api.infrastructure.db.mongo_connection import MongoConnection
from users_api.infrastructure.db.mongo_user_repository import MongoUserRepository


def test_container_wires_mongo_stack(settings) -> None:
    container = DIContainer(settings)

    connection = container.get(MONGO_CONNECTION)
    repository = container.get(UserRepository)

    assert isinstance(connection, MongoConnection)
    assert not connection.is_connected
    assert isinstance(repository, MongoUserRepository)
    assert repository._connection is connection
    assert container.get(UserService) is container.get(UserService)


def test_container_requires_mongo_uri(settings, monkeypatch) -> None:
    monkeypatch.setattr(settings, "mongo_uri", None)

    with pytest.raises(RuntimeError, match="MONGO_URI"):
        DIContainer(settings)


def test_registering_again_replaces_instance() -> None:
    container = BaseContainer()
    first, second = object(), object()
    container.register_singleton("handle", first)
    container.register_singleton("handle", second)

    assert container.get("handle") is second


def test_missing_registration_raises() -> None:
    with pytest.raises(ValueError):
        BaseContainer().get("nothing")
