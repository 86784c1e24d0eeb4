"""
Meal log models.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, Text, DateTime, ForeignKey, Boolean, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Meal(Base):
    """A meal logged by a user, flagged as in or out of their diet"""

    __tablename__ = "meal"

    meal_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    description = Column(Text)
    in_diet = Column(Boolean, nullable=False)
    # Python-side defaults keep microsecond precision; list order relies on it
    consumed_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user = relationship("AppUser", back_populates="meals")
