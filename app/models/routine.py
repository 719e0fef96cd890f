"""
Routine models.

A routine is a named, favouritable exercise plan owned by a profile.
Routines are also created automatically when a training day is assigned
to a week slot; ``routine_weeks.routine_id`` points at them.  Deleting a
routine only clears ``is_active``.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Routine(SQLModel, table=True):
    __tablename__ = "routines"

    id: Optional[int] = Field(default=None, primary_key=True)
    profile_id: int = Field(foreign_key="profiles.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    is_favorite: bool = Field(default=False, nullable=False)

    # Soft delete flag
    is_active: bool = Field(default=True, nullable=False)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class RoutineExercise(SQLModel, table=True):
    """One exercise of a routine, ordered by ``order_in_routine``."""

    __tablename__ = "routine_exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    routine_id: int = Field(foreign_key="routines.id", nullable=False, index=True)
    exercise_id: int = Field(foreign_key="exercises.id", nullable=False)
    order_in_routine: int = Field(default=0, nullable=False)

    sets: int = Field(default=3, ge=1)
    reps: int = Field(default=12, ge=0)
    weight: Optional[float] = Field(default=None)
    rest_time_seconds: int = Field(default=60, ge=0)
    notes: Optional[str] = Field(default=None, max_length=1000)
