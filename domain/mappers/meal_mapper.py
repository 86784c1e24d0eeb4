"""
Meal domain mappers.
Handles transformation between ORM models and DTOs for meal-related entities.
"""

from typing import Iterable

from domain.models import Meal
from domain.schemas.meal_schemas import (
    MealResponse,
    MealListEnvelope,
    MealSummaryResponse,
)


class MealMapper:
    """Mapper for meal transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        return MealResponse.model_validate(meal)

    @staticmethod
    def to_list(meals: Iterable[Meal]) -> MealListEnvelope:
        return MealListEnvelope(meals=[MealMapper.to_response(m) for m in meals])

    @staticmethod
    def summary_to_response(summary) -> MealSummaryResponse:
        """
        Convert a DietSummary to its response DTO.

        Args:
            summary: DietSummary computed from the user's ordered meals

        Returns:
            MealSummaryResponse with the best run serialized meal by meal
        """
        return MealSummaryResponse(
            amount=summary.amount,
            amount_in_diet=summary.amount_in_diet,
            amount_not_in_diet=summary.amount_not_in_diet,
            best_sequence_in_diet=[
                MealMapper.to_response(m) for m in summary.best_sequence_in_diet
            ],
        )
