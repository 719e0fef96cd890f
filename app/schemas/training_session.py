"""
Training session API schemas.

The exercises of a session (planned sets and performed sets) are stored
as JSON on the session row and validated with
:class:`TrainingSessionExercise` at the service layer.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.core.enums import SessionStatus
from app.schemas.set_config import DSDetail, PartialDetail, RPDetail, SetConfig, TextValue


class PerformedSet(BaseModel):
    """A completed set, unique by ``set_number`` within its exercise."""

    set_number: int = Field(..., ge=1)
    reps: Optional[int] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)
    rir: Optional[float] = Field(None, ge=0)
    rest_pause_details: Optional[list[RPDetail]] = None
    drop_set_details: Optional[list[DSDetail]] = None
    partials_details: Optional[PartialDetail] = None
    notes: Optional[str] = Field(None, max_length=1000)


class TrainingSessionExercise(BaseModel):
    exercise_id: int
    exercise_name: TextValue = ""
    exercise_image: TextValue = ""
    order_in_session: int = Field(..., ge=1)
    sets_config: list[SetConfig] = Field(default_factory=list)
    performed_sets: list[PerformedSet] = Field(default_factory=list)
    is_completed: bool = False


class TrainingSessionExerciseCreate(BaseModel):
    exercise_id: int
    exercise_name: str
    exercise_image: Optional[str] = None
    sets_config: list[SetConfig] = Field(default_factory=list)


class TrainingSessionCreate(BaseModel):
    """Schema for starting a training session.

    When ``exercises`` is empty and ``routine_week_id`` is given, the
    exercises are taken from that slot's configuration.  ``day_name`` is
    derived from ``day_of_week`` (or the slot) and is only read when
    neither is available.
    """

    profile_id: int
    routine_week_id: Optional[int] = None
    routine_name: Optional[str] = Field(None, max_length=255)
    day_of_week: Optional[int] = Field(None, ge=1, le=7)
    day_name: Optional[str] = None
    exercises: list[TrainingSessionExerciseCreate] = Field(default_factory=list)


class SetProgressUpdate(BaseModel):
    """Record (or overwrite) one performed set."""

    exercise_id: int
    set_number: int = Field(..., ge=1)
    reps: Optional[int] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)
    rir: Optional[float] = Field(None, ge=0)
    rest_pause_details: Optional[list[RPDetail]] = None
    drop_set_details: Optional[list[DSDetail]] = None
    partials_details: Optional[PartialDetail] = None
    notes: Optional[str] = Field(None, max_length=1000)
    current_exercise_index: Optional[int] = Field(None, ge=0)


class SessionComplete(BaseModel):
    notes: Optional[str] = Field(None, max_length=1000)
    rating: Optional[int] = Field(None, ge=1, le=5)


class SessionProgress(BaseModel):
    """Live completion and duration metrics of a session."""

    total_exercises: int
    completed_exercises: int
    total_sets: int
    completed_sets: int
    duration_minutes: int


class SessionSummary(SessionProgress):
    start_time: datetime.datetime
    end_time: datetime.datetime


class TrainingSessionResponse(BaseModel):
    """Schema for a training session in API responses."""

    id: int
    profile_id: int
    routine_week_id: Optional[int]
    routine_name: str
    day_of_week: int
    day_name: str
    status: SessionStatus
    current_exercise_index: int
    start_time: datetime.datetime
    last_activity: datetime.datetime
    end_time: Optional[datetime.datetime]
    exercises: list[TrainingSessionExercise]
    notes: Optional[str]
    rating: Optional[int]
    progress: SessionProgress


class DeletedSession(BaseModel):
    """Identifies a finished session removed from the history."""

    id: int
    routine_name: str
    day_name: str
    session_date: datetime.date
