"""
Training session database model.

Stores a live or finished workout.  Exercises, their planned sets and
the performed sets are kept together as JSON (one document per
session) and validated through the ``TrainingSessionExercise`` schema
at the service layer.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from app.core.enums import SessionStatus


class TrainingSession(SQLModel, table=True):
    """A single training session of one profile."""

    __tablename__ = "training_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    profile_id: int = Field(foreign_key="profiles.id", nullable=False, index=True)
    routine_week_id: Optional[int] = Field(default=None, foreign_key="routine_weeks.id")

    routine_name: str = Field(nullable=False, max_length=255)
    day_of_week: int = Field(nullable=False, ge=1, le=7)
    day_name: str = Field(nullable=False, max_length=20)

    status: SessionStatus = Field(default=SessionStatus.ACTIVE, nullable=False, index=True)
    current_exercise_index: int = Field(default=0, nullable=False)

    start_time: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    last_activity: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    end_time: Optional[datetime.datetime] = Field(default=None)

    # List of TrainingSessionExercise dicts
    exercises: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    notes: Optional[str] = Field(default=None, max_length=1000)
    rating: Optional[int] = Field(default=None, ge=1, le=5)
