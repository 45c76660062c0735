from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from .database_provider import MONGO_CONNECTION

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the connection from the database provider and injects it.
        """
        settings = container.get(Settings)
        connection = container.get(MONGO_CONNECTION)

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            MongoUserRepository(connection, collection_name=settings.users_collection),
        )
