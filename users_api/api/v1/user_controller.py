"""
User Controller
===============

FastAPI controller for the user resource. Mounted under /api/users.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from users_api.api.v1.dependencies import get_user_service
from users_api.application.dto.user_dto import (
    ErrorResponse,
    UserCreateRequest,
    UserResponse,
)
from users_api.application.services.user_service import UserService
from users_api.domain.exceptions import UserError, UserStoreError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    description="Get every stored user in insertion order. Empty array when there are none.",
    responses={500: {"model": ErrorResponse}},
)
@router.get("/", response_model=List[UserResponse], include_in_schema=False)
async def list_users(
    service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    """List all users."""
    try:
        users = await service.list_users()
    except UserStoreError as e:
        logger.error("Listing users failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return [UserResponse.from_entity(user) for user in users]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="""
    Create a user from `name` and `email`.

    Both fields are required and `email` must not belong to an existing user.
    The response carries the store-assigned `id` and the `createdAt` stamp.
    """,
    responses={400: {"model": ErrorResponse}},
)
@router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_user(
    request: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user."""
    try:
        user = await service.create_user(name=request.name, email=request.email)
    except UserError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return UserResponse.from_entity(user)
