"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import (
    UserCreate,
    UserUpdate,
    UserResponse,
    UserEnvelope,
    UserCreatedEnvelope,
)
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealEnvelope,
    MealListEnvelope,
    MealSummaryResponse,
    MealSummaryEnvelope,
)

__all__ = [
    # User schemas
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserEnvelope",
    "UserCreatedEnvelope",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealEnvelope",
    "MealListEnvelope",
    "MealSummaryResponse",
    "MealSummaryEnvelope",
]
