"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
import logging
from typing import List

from bson.errors import BSONError
from pymongo import ASCENDING
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from users_api.domain.constants.user_fields import UserFields
from users_api.domain.exceptions import (
    DuplicateEmailError,
    StoreUnavailableError,
    UserStoreError,
    UserValidationError,
)
from users_api.domain.models.user import User
from users_api.domain.repositories.user_repository import UserRepository
from users_api.infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository.

    Email uniqueness is enforced by a unique index, created by
    `ensure_indexes()` at startup.
    """

    COLLECTION_NAME = "users"

    def __init__(self, connection: MongoConnection, collection_name: str = COLLECTION_NAME):
        """
        Args:
            connection: Shared persistence handle
            collection_name: Collection holding user documents
        """
        self._connection = connection
        self._collection_name = collection_name

    @property
    def _collection(self) -> AsyncCollection:
        # Resolved per call: the handle only has a database once connected.
        return self._connection.get_collection(self._collection_name)

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=str(doc[UserFields.MONGO_ID]),
            name=doc.get(UserFields.NAME, ""),
            email=doc.get(UserFields.EMAIL, ""),
            created_at=doc.get(UserFields.CREATED_AT),
        )

    def _to_document(self, user: User) -> dict:
        """Convert User entity to MongoDB document (without _id)."""
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.CREATED_AT: user.created_at,
        }

    async def ensure_indexes(self) -> None:
        try:
            await self._collection.create_index(
                [(UserFields.EMAIL, ASCENDING)], unique=True, name="email_unique"
            )
        except (PyMongoError, StoreUnavailableError) as e:
            raise UserStoreError(str(e)) from e

    async def create(self, user: User) -> User:
        """Insert a new user and return it with its assigned id."""
        doc = self._to_document(user)
        try:
            result = await self._collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise DuplicateEmailError(str(e)) from e
        except BSONError as e:
            # Payload the driver cannot encode, e.g. over the 16 MB document limit.
            raise UserValidationError(str(e)) from e
        except (PyMongoError, StoreUnavailableError) as e:
            raise UserStoreError(str(e)) from e

        user.id = str(result.inserted_id)
        logger.info("User %s created", user.id)
        return user

    async def list_all(self) -> List[User]:
        """Return all users, oldest first (ObjectIds increase with insertion)."""
        try:
            cursor = self._collection.find().sort(UserFields.MONGO_ID, ASCENDING)
            docs = await cursor.to_list()
        except (PyMongoError, StoreUnavailableError) as e:
            raise UserStoreError(str(e)) from e
        return [self._to_entity(doc) for doc in docs]
