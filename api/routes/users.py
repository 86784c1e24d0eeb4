"""User management routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user
from api.responses import SESSION_ERROR_RESPONSES
from app.config import settings
from domain.models import AppUser
from domain.schemas.user_schemas import (
    UserCreate,
    UserUpdate,
    UserEnvelope,
    UserCreatedEnvelope,
)
from domain.mappers import UserMapper
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("dailydiet.api.users")


@router.post(
    "", response_model=UserCreatedEnvelope, status_code=status.HTTP_201_CREATED
)
def create_user(
    payload: UserCreate, response: Response, db: Session = Depends(get_db)
):
    """Create a user and start its session (token in body and cookie)"""
    user = UserService.create_user(db, payload.name)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=user.session_id,
        max_age=settings.session_cookie_max_age,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return UserMapper.to_created_response(user)


@router.get(
    "/{user_id}", response_model=UserEnvelope, responses=SESSION_ERROR_RESPONSES
)
def get_user(user: AppUser = Depends(get_current_user)):
    """Get the authenticated user's profile"""
    return UserMapper.to_envelope(user)


@router.patch(
    "/{user_id}", response_model=UserEnvelope, responses=SESSION_ERROR_RESPONSES
)
def update_user(
    payload: UserUpdate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Rename the authenticated user"""
    user = UserService.rename_user(db, user, payload.name)
    return UserMapper.to_envelope(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=SESSION_ERROR_RESPONSES,
)
def delete_user(
    response: Response,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete the authenticated user and all of their meals; ends the session."""
    UserService.delete_user(db, user.user_id)
    response.delete_cookie(key=settings.session_cookie_name, path="/")
