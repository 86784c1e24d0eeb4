"""
Tests for the service layer with real database operations.

- UserService: account creation, session authentication, rename, delete
- MealService: CRUD scoped to the owner, partial updates, summary ordering
"""

import pytest
import uuid
from datetime import timedelta
from sqlalchemy.orm import Session

from test_fixtures import BASE_TIME
from services.user_service import UserService
from services.meal_service import MealService
from app.exceptions import NotFoundError
from domain.schemas.meal_schemas import MealCreate, MealUpdate


# =============================================================================
# USER SERVICE TESTS
# =============================================================================


def test_user_service_authenticate(db_session: Session):
    user = UserService.create_user(db_session, "Sarah Martinez")

    assert UserService.authenticate(db_session, user.user_id, user.session_id) is user


def test_user_service_authenticate_rejects_foreign_token(db_session: Session):
    user = UserService.create_user(db_session, "Michael Chen")
    other = UserService.create_user(db_session, "Emma Johnson")

    with pytest.raises(NotFoundError) as exc_info:
        UserService.authenticate(db_session, user.user_id, other.session_id)
    assert exc_info.value.http_status == 404

    with pytest.raises(NotFoundError):
        UserService.authenticate(db_session, uuid.uuid4(), user.session_id)


def test_user_service_rename_and_delete(db_session: Session):
    user = UserService.create_user(db_session, "Raj")

    renamed = UserService.rename_user(db_session, user, "Raj Patel")
    assert renamed.name == "Raj Patel"

    UserService.delete_user(db_session, user.user_id)
    with pytest.raises(NotFoundError):
        UserService.delete_user(db_session, user.user_id)


# =============================================================================
# MEAL SERVICE TESTS
# =============================================================================


def test_meal_service_create_and_get(db_session: Session):
    user = UserService.create_user(db_session, "Meal Owner")
    data = MealCreate(name="  Greek yogurt ", inDiet=True, consumedAt=BASE_TIME)

    meal = MealService.create_meal(db_session, user.user_id, data)

    assert meal.name == "Greek yogurt"
    assert MealService.get_meal(db_session, user.user_id, meal.meal_id) is meal
    with pytest.raises(NotFoundError):
        MealService.get_meal(db_session, user.user_id, uuid.uuid4())


def test_meal_service_update_only_sent_fields(db_session: Session):
    user = UserService.create_user(db_session, "Partial Update")
    meal = MealService.create_meal(
        db_session,
        user.user_id,
        MealCreate(name="Pasta", description="Carbonara", inDiet=False),
    )

    updated = MealService.update_meal(
        db_session, user.user_id, meal.meal_id, MealUpdate(inDiet=True)
    )

    assert updated.in_diet is True
    assert updated.name == "Pasta"
    assert updated.description == "Carbonara"


def test_meal_service_update_and_delete_missing_meal(db_session: Session):
    user = UserService.create_user(db_session, "Missing Meal")

    with pytest.raises(NotFoundError):
        MealService.update_meal(
            db_session, user.user_id, uuid.uuid4(), MealUpdate(name="Nope")
        )
    with pytest.raises(NotFoundError):
        MealService.delete_meal(db_session, user.user_id, uuid.uuid4())


def test_meal_service_summary_uses_consumption_order(db_session: Session):
    """
    Meals logged out of order are summarized chronologically.

    Chronological: B1(in) B2(in) L(out) D1(in) D2(in) D3(in)
    """
    user = UserService.create_user(db_session, "Summary User")
    entries = [
        ("D2", True, 11),
        ("B1", True, 0),
        ("L", False, 5),
        ("D3", True, 12),
        ("B2", True, 1),
        ("D1", True, 10),
    ]
    for name, in_diet, hours in entries:
        MealService.create_meal(
            db_session,
            user.user_id,
            MealCreate(
                name=name, inDiet=in_diet, consumedAt=BASE_TIME + timedelta(hours=hours)
            ),
        )

    summary = MealService.get_summary(db_session, user.user_id)

    assert summary.amount == 6
    assert summary.amount_in_diet == 5
    assert summary.amount_not_in_diet == 1
    assert [m.name for m in summary.best_sequence_in_diet] == ["D1", "D2", "D3"]


def test_meal_service_summary_for_user_without_meals(db_session: Session):
    user = UserService.create_user(db_session, "No Meals")

    summary = MealService.get_summary(db_session, user.user_id)

    assert summary.amount == 0
    assert summary.best_sequence_in_diet == []
