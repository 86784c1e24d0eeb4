from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from typing import Optional, List
from datetime import datetime, timezone
from uuid import UUID


def _to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to UTC, treating naive values as UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class MealCreate(BaseModel):
    """Body of POST /users/{user_id}/meals. Accepts camelCase or snake_case keys."""

    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    in_diet: StrictBool = Field(..., alias="inDiet")
    consumed_at: Optional[datetime] = Field(None, alias="consumedAt")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("consumed_at")
    @classmethod
    def normalize_consumed_at(cls, v):
        return _to_utc(v) if v is not None else v


class MealUpdate(BaseModel):
    """Body of PUT /users/{user_id}/meals/{meal_id}. Only supplied fields change."""

    name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    in_diet: Optional[StrictBool] = Field(None, alias="inDiet")
    consumed_at: Optional[datetime] = Field(None, alias="consumedAt")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v):
        if v is None:
            raise ValueError("name may not be null")
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("in_diet")
    @classmethod
    def reject_null_in_diet(cls, v):
        if v is None:
            raise ValueError("inDiet may not be null")
        return v

    @field_validator("consumed_at")
    @classmethod
    def normalize_consumed_at(cls, v):
        if v is None:
            raise ValueError("consumedAt may not be null")
        return _to_utc(v)

    def changes(self) -> dict:
        """Fields the client actually sent, keyed by column name."""
        return self.model_dump(exclude_unset=True)


class MealResponse(BaseModel):
    meal_id: UUID
    user_id: UUID
    name: str
    description: Optional[str]
    in_diet: bool
    consumed_at: datetime
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MealEnvelope(BaseModel):
    meal: MealResponse


class MealListEnvelope(BaseModel):
    meals: List[MealResponse]


class MealSummaryResponse(BaseModel):
    """Diet adherence statistics for one user"""

    amount: int = Field(..., description="Total number of meals")
    amount_in_diet: int = Field(..., description="Meals flagged as in diet")
    amount_not_in_diet: int = Field(..., description="Meals flagged as out of diet")
    best_sequence_in_diet: List[MealResponse] = Field(
        ..., description="Longest run of consecutive in-diet meals"
    )


class MealSummaryEnvelope(BaseModel):
    summary: MealSummaryResponse
