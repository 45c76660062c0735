"""
List Users Use Case
===================
"""
from typing import List

from users_api.domain.models.user import User
from users_api.domain.repositories.user_repository import UserRepository


class ListUsersUseCase:
    """Use case for reading every stored user in insertion order."""

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository

    async def execute(self) -> List[User]:
        return await self._repository.list_all()
