"""
User Service
============

Application service that coordinates user-related operations.
"""
from typing import List, Optional

from users_api.domain.models.user import User
from users_api.domain.repositories.user_repository import UserRepository
from users_api.application.use_cases.user.create_user import CreateUserUseCase
from users_api.application.use_cases.user.list_users import ListUsersUseCase


class UserService:
    """
    Application service for user operations.

    Stateless apart from the repository it was built with; every call is a
    single round trip to the store.
    """

    def __init__(self, user_repository: UserRepository):
        """
        Initialize service with repository.

        Args:
            user_repository: Repository for user persistence
        """
        self._repository = user_repository
        self._create_use_case = CreateUserUseCase(user_repository)
        self._list_use_case = ListUsersUseCase(user_repository)

    async def create_user(self, name: Optional[str], email: Optional[str]) -> User:
        """
        Create a user.

        Args:
            name: User name
            email: User email

        Returns:
            Created user entity
        """
        return await self._create_use_case.execute(name=name, email=email)

    async def list_users(self) -> List[User]:
        """
        List all users.

        Returns:
            List of user entities, oldest first
        """
        return await self._list_use_case.execute()
