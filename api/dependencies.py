"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from uuid import UUID
from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError
from domain.models import AppUser, get_db_session
from services.user_service import UserService


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_session_token(
    request: Request, authorization: Optional[str] = Header(None)
) -> str:
    """
    Extract the session token from the request.

    ``Authorization: Bearer <token>`` wins over the session cookie.

    Raises:
        NotFoundError: If neither carries a token
    """
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()

    token = request.cookies.get(settings.session_cookie_name)
    if token:
        return token
    raise NotFoundError("User not found.")


def require_valid_session_token(token: str = Depends(get_session_token)) -> str:
    """Reject tokens that are not shaped like an issued session token."""
    try:
        UUID(token)
    except ValueError:
        raise ServiceValidationError(
            "Error on validate schema.",
            details=[
                {
                    "loc": ["session", "sessionId"],
                    "msg": "Session token must be a valid UUID",
                    "type": "uuid_parsing",
                }
            ],
        )
    return token


def get_current_user(
    user_id: UUID,
    token: str = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> AppUser:
    """
    Resolve the path's user and check the session token was issued for it.

    Raises:
        NotFoundError: If the user does not exist or the token is not theirs
    """
    return UserService.authenticate(db, user_id, token)
