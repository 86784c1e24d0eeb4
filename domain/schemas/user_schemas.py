from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from uuid import UUID


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class UserUpdate(UserCreate):
    """Rename an existing user"""


class UserResponse(BaseModel):
    user_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserEnvelope(BaseModel):
    user: UserResponse


class UserCreatedEnvelope(UserEnvelope):
    """Creation response; the session token is only ever returned here."""

    session_id: str
