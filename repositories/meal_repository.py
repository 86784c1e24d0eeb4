"""
Meal Repository - Data access layer for meal operations
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access. Every query is scoped to the owning user."""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_for_user(self, user_id: UUID, meal_id: UUID) -> Optional[Meal]:
        """Get a meal by ID, only if it belongs to the user"""
        return (
            self.db.query(Meal)
            .filter(Meal.meal_id == meal_id, Meal.user_id == user_id)
            .first()
        )

    def list_for_user(self, user_id: UUID) -> List[Meal]:
        """
        Get all meals of a user in chronological order.

        Ordered by consumption time, then creation (insertion) time, then ID
        so meals sharing a consumption time keep the order they were logged in.
        """
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.consumed_at, Meal.created_at, Meal.meal_id)
            .all()
        )

    def create_meal(
        self,
        user_id: UUID,
        name: str,
        in_diet: bool,
        description: str = None,
        consumed_at=None,
    ) -> Meal:
        """Create a meal; consumed_at falls back to the column default"""
        meal = Meal(
            user_id=user_id,
            name=name,
            description=description,
            in_diet=in_diet,
        )
        if consumed_at is not None:
            meal.consumed_at = consumed_at
        return self.create(meal)

    def apply_changes(self, meal: Meal, changes: dict) -> Meal:
        """Set the given columns on a meal and persist; always bumps updated_at"""
        for key, value in changes.items():
            if hasattr(meal, key):
                setattr(meal, key, value)
        meal.updated_at = func.now()
        return self.update(meal)

    def delete_for_user(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal if it belongs to the user"""
        meal = self.get_for_user(user_id, meal_id)
        if meal:
            self.delete(meal)
            return True
        return False
