"""Meal log routes, nested under the owning user"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db, get_current_user, require_valid_session_token
from api.responses import SESSION_ERROR_RESPONSES
from domain.models import AppUser
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealEnvelope,
    MealListEnvelope,
    MealSummaryEnvelope,
)
from domain.mappers import MealMapper
from services.meal_service import MealService

router = APIRouter(
    prefix="/users/{user_id}/meals",
    tags=["Meals"],
    responses=SESSION_ERROR_RESPONSES,
)
logger = logging.getLogger("dailydiet.api.meals")


@router.get("", response_model=MealListEnvelope)
def list_meals(
    user: AppUser = Depends(get_current_user), db: Session = Depends(get_db)
):
    """List the user's meals, oldest first"""
    meals = MealService.list_meals(db, user.user_id)
    return MealMapper.to_list(meals)


# Declared before /{meal_id} so "summary" is not parsed as a meal ID
@router.get(
    "/summary",
    response_model=MealSummaryEnvelope,
    dependencies=[Depends(require_valid_session_token)],
)
def get_summary(
    user: AppUser = Depends(get_current_user), db: Session = Depends(get_db)
):
    """
    Diet adherence summary for the user.

    Returns the meal counts and the longest run of consecutive in-diet
    meals, in chronological order.
    """
    summary = MealService.get_summary(db, user.user_id)
    return MealSummaryEnvelope(summary=MealMapper.summary_to_response(summary))


@router.get("/{meal_id}", response_model=MealEnvelope)
def get_meal(
    meal_id: UUID,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get one of the user's meals"""
    meal = MealService.get_meal(db, user.user_id, meal_id)
    return MealEnvelope(meal=MealMapper.to_response(meal))


@router.post("", response_model=MealEnvelope, status_code=status.HTTP_201_CREATED)
def create_meal(
    payload: MealCreate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Log a meal for the user.

    Example:
    - {"name": "Oatmeal", "description": "With banana", "inDiet": true}
    """
    meal = MealService.create_meal(db, user.user_id, payload)
    return MealEnvelope(meal=MealMapper.to_response(meal))


@router.put(
    "/{meal_id}",
    response_model=MealEnvelope,
    dependencies=[Depends(require_valid_session_token)],
)
def update_meal(
    meal_id: UUID,
    payload: MealUpdate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update the supplied fields of one of the user's meals"""
    meal = MealService.update_meal(db, user.user_id, meal_id, payload)
    return MealEnvelope(meal=MealMapper.to_response(meal))


@router.delete(
    "/{meal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_valid_session_token)],
)
def delete_meal(
    meal_id: UUID,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete one of the user's meals"""
    MealService.delete_meal(db, user.user_id, meal_id)
