"""
Shared test fixtures and utilities for the Daily Diet test suite.

Mock objects, helper functions and the shared test client reused across
the test modules.
"""

import uuid
from types import SimpleNamespace
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from main import app

# Shared client; route tests pass the session token explicitly in headers
client = TestClient(app)

BASE_TIME = datetime(2026, 3, 2, 7, 30, tzinfo=timezone.utc)


def make_user(user_id=None, name="Sarah Martinez", session_id=None):
    """
    Create a mock user object for testing.

    Returns:
        SimpleNamespace: Mock user with the attributes routes and mappers read
    """
    now = datetime.now(timezone.utc)
    return SimpleNamespace(
        user_id=user_id or uuid.uuid4(),
        session_id=session_id or str(uuid.uuid4()),
        name=name,
        created_at=now,
        updated_at=now,
    )


def make_meal(name="Oatmeal", in_diet=True, user_id=None, consumed_at=None):
    """
    Create a mock meal object for testing.

    Example:
        >>> meals = [make_meal("A"), make_meal("B", in_diet=False)]
    """
    now = datetime.now(timezone.utc)
    return SimpleNamespace(
        meal_id=uuid.uuid4(),
        user_id=user_id or uuid.uuid4(),
        name=name,
        description=None,
        in_diet=in_diet,
        consumed_at=consumed_at or now,
        created_at=now,
        updated_at=now,
    )


def meal_time(hours: int) -> str:
    """ISO timestamp `hours` after BASE_TIME, for ordering meals explicitly."""
    return (BASE_TIME + timedelta(hours=hours)).isoformat()


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register_user(http=None, name="Sarah Martinez"):
    """Create a user through the API and return (user_id, session_token)."""
    http = http or client
    r = http.post("/users", json={"name": name})
    assert r.status_code == 201, r.text
    body = r.json()
    return body["user"]["user_id"], body["session_id"]


def log_meals(user_id, token, flags, http=None):
    """
    Log one meal per flag, one hour apart, named M0, M1, ...

    Returns:
        list of created meal dicts in chronological order
    """
    http = http or client
    created = []
    for i, in_diet in enumerate(flags):
        r = http.post(
            f"/users/{user_id}/meals",
            json={"name": f"M{i}", "inDiet": in_diet, "consumedAt": meal_time(i)},
            headers=auth(token),
        )
        assert r.status_code == 201, r.text
        created.append(r.json()["meal"])
    return created
