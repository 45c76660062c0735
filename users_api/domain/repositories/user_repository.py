"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List

from users_api.domain.models.user import User


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.

    All methods are coroutines; implementations yield to the event loop
    for the store round trip.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: User entity to create (id not yet assigned)

        Returns:
            Created user entity with its store-assigned id

        Raises:
            DuplicateEmailError: If another user already has this email
            UserStoreError: On any other store failure
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """
        Return every user in insertion order.

        Raises:
            UserStoreError: If the store query fails
        """
        pass

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the indexes the store relies on (unique email)."""
        pass
