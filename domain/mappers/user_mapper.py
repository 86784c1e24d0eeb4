"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import AppUser
from domain.schemas.user_schemas import (
    UserResponse,
    UserEnvelope,
    UserCreatedEnvelope,
)


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: AppUser) -> UserResponse:
        """
        Convert AppUser ORM model to UserResponse DTO.

        The session token is not included; only to_created_response
        returns it.
        """
        return UserResponse(
            user_id=user.user_id,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_envelope(user: AppUser) -> UserEnvelope:
        return UserEnvelope(user=UserMapper.to_response(user))

    @staticmethod
    def to_created_response(user: AppUser) -> UserCreatedEnvelope:
        return UserCreatedEnvelope(
            user=UserMapper.to_response(user), session_id=user.session_id
        )
