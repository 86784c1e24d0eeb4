from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import AppUser
from repositories import UserRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Business logic for user accounts and their sessions"""

    @staticmethod
    def create_user(db: Session, name: str) -> AppUser:
        """Create a user and issue its session token"""
        user = UserRepository(db).create_user(name)
        logger.info(f"user_created user_id={user.user_id}")
        return user

    @staticmethod
    def authenticate(db: Session, user_id: UUID, session_id: str) -> AppUser:
        """
        Resolve the user a session token was issued for.

        A token that belongs to another user is reported exactly like an
        unknown user, so callers cannot probe which user IDs exist.

        Raises:
            NotFoundError: If no user matches both the ID and the token
        """
        user = UserRepository(db).get_by_session(user_id, session_id)
        if not user:
            logger.warning(f"session_rejected user_id={user_id}")
            raise NotFoundError("User not found.")
        return user

    @staticmethod
    def rename_user(db: Session, user: AppUser, name: str) -> AppUser:
        user.name = name
        user = UserRepository(db).update_user(user)
        logger.info(f"user_renamed user_id={user.user_id}")
        return user

    @staticmethod
    def delete_user(db: Session, user_id: UUID) -> None:
        """Delete a user together with all of its meals"""
        if not UserRepository(db).delete_user(user_id):
            raise NotFoundError("User not found.")
        logger.info(f"user_deleted user_id={user_id}")
