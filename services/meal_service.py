from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from repositories import MealRepository
from services.diet_summary import DietSummary, summarize
from app.exceptions import NotFoundError

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for a user's meal log"""

    @staticmethod
    def list_meals(db: Session, user_id: UUID) -> List[Meal]:
        return MealRepository(db).list_for_user(user_id)

    @staticmethod
    def get_meal(db: Session, user_id: UUID, meal_id: UUID) -> Meal:
        """
        Get one of the user's meals.

        Raises:
            NotFoundError: If the meal does not exist or belongs to someone else
        """
        meal = MealRepository(db).get_for_user(user_id, meal_id)
        if not meal:
            raise NotFoundError("Meal not found.")
        return meal

    @staticmethod
    def create_meal(db: Session, user_id: UUID, data: MealCreate) -> Meal:
        meal = MealRepository(db).create_meal(
            user_id=user_id,
            name=data.name,
            description=data.description,
            in_diet=data.in_diet,
            consumed_at=data.consumed_at,
        )
        logger.info(
            f"meal_created user_id={user_id} meal_id={meal.meal_id} "
            f"in_diet={meal.in_diet}"
        )
        return meal

    @staticmethod
    def update_meal(
        db: Session, user_id: UUID, meal_id: UUID, data: MealUpdate
    ) -> Meal:
        """
        Apply a partial update to one of the user's meals.

        Only the fields present in the request body are written.

        Raises:
            NotFoundError: If the meal does not exist for this user
        """
        repo = MealRepository(db)
        meal = repo.get_for_user(user_id, meal_id)
        if not meal:
            raise NotFoundError("Meal not found.")

        changes = data.changes()
        try:
            meal = repo.apply_changes(meal, changes)
        except Exception:
            db.rollback()
            logger.exception("Error updating meal %s for user %s", meal_id, user_id)
            raise

        logger.info(
            f"meal_updated user_id={user_id} meal_id={meal_id} "
            f"fields={sorted(changes)}"
        )
        return meal

    @staticmethod
    def delete_meal(db: Session, user_id: UUID, meal_id: UUID) -> None:
        if not MealRepository(db).delete_for_user(user_id, meal_id):
            raise NotFoundError("Meal not found.")
        logger.info(f"meal_deleted user_id={user_id} meal_id={meal_id}")

    @staticmethod
    def get_summary(db: Session, user_id: UUID) -> DietSummary:
        """Summarize the user's meals in chronological order"""
        summary = summarize(MealRepository(db).list_for_user(user_id))
        logger.info(
            f"summary_computed user_id={user_id} amount={summary.amount} "
            f"best_sequence={len(summary.best_sequence_in_diet)}"
        )
        return summary
