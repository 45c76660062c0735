"""
Create User Use Case
====================

Business use case for creating a new user record.
"""
from typing import Optional

from users_api.domain.models.user import User
from users_api.domain.repositories.user_repository import UserRepository
from users_api.domain.validation import validate_new_user


class CreateUserUseCase:
    """
    Use case for creating a user.

    Required fields are checked here; email uniqueness is left to the
    repository, which reports a clash as DuplicateEmailError.
    """

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository

    async def execute(self, name: Optional[str], email: Optional[str]) -> User:
        """
        Execute the create user use case.

        Args:
            name: User name from the request payload
            email: User email from the request payload

        Returns:
            Created user entity with id and created_at set

        Raises:
            UserValidationError: If a required field is missing
            DuplicateEmailError: If the email is already taken
            UserStoreError: On any other store failure
        """
        validate_new_user(name, email)
        return await self._repository.create(User(name=name, email=email))
