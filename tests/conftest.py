"""Shared test fixtures."""

from dataclasses import dataclass, field
from typing import List

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from users_api.application.services.user_service import UserService
from users_api.core.config import Settings, reset_settings
from users_api.di.base_container import BaseContainer
from users_api.di.providers import MONGO_CONNECTION
from users_api.domain.exceptions import (
    DuplicateEmailError,
    StoreUnavailableError,
    UserStoreError,
)
from users_api.domain.models.user import User
from users_api.domain.repositories.user_repository import UserRepository
from users_api.main import create_application


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository enforcing email uniqueness like the unique index."""

    users: List[User] = field(default_factory=list)
    fail_reads: bool = False
    indexes_ensured: bool = False

    async def create(self, user: User) -> User:
        if any(existing.email == user.email for existing in self.users):
            raise DuplicateEmailError(
                "E11000 duplicate key error collection: users_api.users "
                f"index: email_unique dup key: {{ email: \"{user.email}\" }}"
            )
        user.id = str(ObjectId())
        self.users.append(user)
        return user

    async def list_all(self) -> List[User]:
        if self.fail_reads:
            raise UserStoreError("connection closed")
        return list(self.users)

    async def ensure_indexes(self) -> None:
        self.indexes_ensured = True


@dataclass
class FakeConnection:
    """Stand-in for MongoConnection that never opens a socket."""

    fail: bool = False
    is_connected: bool = False
    closed: bool = False

    async def connect(self) -> None:
        if self.fail:
            raise StoreUnavailableError("No servers found yet")
        self.is_connected = True

    async def close(self) -> None:
        self.is_connected = False
        self.closed = True


@pytest.fixture
def settings(monkeypatch) -> Settings:
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017/users_test")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    reset_settings()
    yield Settings()
    reset_settings()


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def container(settings, repository, connection) -> BaseContainer:
    container = BaseContainer()
    container.register_singleton(Settings, settings)
    container.register_singleton(MONGO_CONNECTION, connection)
    container.register_singleton(UserRepository, repository)
    container.register_singleton(UserService, UserService(repository))
    return container


@pytest.fixture
def client(settings, container):
    app = create_application(settings=settings, container=container)
    with TestClient(app) as test_client:
        yield test_client
