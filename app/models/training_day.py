"""
Training day models.

A training day is a reusable, named list of exercises.  When it is
assigned to a week slot without a saved configuration, its exercises
seed the slot's default configuration.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class TrainingDay(SQLModel, table=True):
    __tablename__ = "training_days"

    id: Optional[int] = Field(default=None, primary_key=True)
    profile_id: int = Field(foreign_key="profiles.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)

    # Soft delete flag
    is_active: bool = Field(default=True, nullable=False)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class TrainingDayExercise(SQLModel, table=True):
    """One exercise assignment within a training day, ordered by ``order_index``."""

    __tablename__ = "training_day_exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    training_day_id: int = Field(foreign_key="training_days.id", nullable=False, index=True)
    exercise_id: int = Field(foreign_key="exercises.id", nullable=False)
    order_index: int = Field(default=0, nullable=False)

    sets: int = Field(default=3, ge=1)
    reps: int = Field(default=10, ge=0)
    weight: Optional[float] = Field(default=None)
    rest_seconds: int = Field(default=60, ge=0)
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime = Field(default_factory=datetime.utcnow)
