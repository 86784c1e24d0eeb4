"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import ServiceValidationError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_session(self, user_id: UUID, session_id: str) -> Optional[AppUser]:
        """Get user only if the session token was issued for that user"""
        return (
            self.db.query(AppUser)
            .filter(AppUser.user_id == user_id, AppUser.session_id == session_id)
            .first()
        )

    def create_user(self, name: str) -> AppUser:
        """Create a new user with a freshly issued session token"""
        user = AppUser(name=name)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ServiceValidationError("Could not issue a session for the new user")

    def update_user(self, user: AppUser) -> AppUser:
        """Update user information"""
        return self.update(user)

    def delete_user(self, user_id: UUID) -> bool:
        """Delete user and all related meals (cascade)"""
        user = self.get_by_id(user_id)
        if user:
            self.delete(user)
            return True
        return False
