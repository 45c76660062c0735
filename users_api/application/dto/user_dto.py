"""
User DTO
========

Pydantic models for user API requests and responses.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from users_api.domain.models.user import User
from users_api.utils.datetime_utils import to_iso


class UserCreateRequest(BaseModel):
    """
    DTO for creating a user.

    Both fields are optional at this layer so that a missing field reaches
    the domain validator and gets its message, not a framework one.
    """
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address, unique across users")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Rafia",
                "email": "rafia@example.com",
            }
        }
    )


class UserResponse(BaseModel):
    """DTO for user data. `createdAt` keeps the stored document's casing."""
    id: str
    name: str
    email: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "6928422b8c9933d948cfdc21",
                "name": "Rafia",
                "email": "rafia@example.com",
                "createdAt": "2025-12-20T09:11:50.840Z",
            }
        },
    )

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> Optional[str]:
        return to_iso(value)

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )


class ErrorResponse(BaseModel):
    """DTO for every error body the API returns."""
    error: str
