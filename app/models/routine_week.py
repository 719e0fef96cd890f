"""
Week slot database model.

One row per (profile, weekday).  The exercise configuration is stored
as a JSON list of ``ExerciseConfigItem`` dicts and is always replaced
as a whole.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


class RoutineWeek(SQLModel, table=True):
    """A weekday slot of one profile's weekly schedule.

    ``day_name`` is always derived from ``day_of_week`` through
    :func:`app.planning.day_mapping.id_to_name`.
    """

    __tablename__ = "routine_weeks"
    __table_args__ = (UniqueConstraint("profile_id", "day_of_week", name="uq_routine_week_profile_day"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    profile_id: int = Field(foreign_key="profiles.id", nullable=False, index=True)
    day_of_week: int = Field(nullable=False, ge=1, le=7)
    day_name: str = Field(nullable=False, max_length=20)
    is_rest_day: bool = Field(default=False, nullable=False)

    routine_id: Optional[int] = Field(default=None, foreign_key="routines.id")
    routine_name: Optional[str] = Field(default=None, max_length=255)
    training_day_id: Optional[int] = Field(default=None, foreign_key="training_days.id")

    # Saved configuration (list of ExerciseConfigItem dicts), None when unset
    exercises_config: Optional[list] = Field(default=None, sa_column=Column(JSON, nullable=True))

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def has_configuration(self) -> bool:
        return bool(self.exercises_config)
