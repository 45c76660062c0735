from typing import TYPE_CHECKING

from ...core.config import Settings
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer

MONGO_CONNECTION = "mongo_connection"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the store handle"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB connection in the container.
        The connection is created unconnected; the application lifespan connects it.
        """
        settings = container.get(Settings)

        container.register_singleton(
            MONGO_CONNECTION,
            MongoConnection(
                uri=settings.require_mongo_uri(),
                database_name=settings.mongo_database_name,
                server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
                connect_retries=settings.mongo_connect_retries,
                connect_backoff_sec=settings.mongo_connect_backoff_sec,
            ),
        )
