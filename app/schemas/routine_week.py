"""
Week slot and configuration API schemas.
"""

import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from app.core.enums import Technique
from app.schemas.set_config import ExerciseConfigItem, SetConfig


class RoutineWeekResponse(BaseModel):
    """Schema for a week slot in API responses."""

    id: int
    profile_id: int
    day_of_week: int
    day_name: str
    is_rest_day: bool
    routine_id: Optional[int]
    routine_name: Optional[str]
    training_day_id: Optional[int]
    has_configuration: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class RoutineWeekInitialize(BaseModel):
    profile_id: int


class RoutineWeekUpdate(BaseModel):
    """Assign a routine or training day to a slot, or mark it as a rest day."""

    profile_id: int
    routine_id: Optional[int] = None
    training_day_id: Optional[int] = None
    is_rest_day: Optional[bool] = None


# ----------------------------------------------------------------------
# Configuration
# ----------------------------------------------------------------------


class RoutineWeekHeader(BaseModel):
    id: int
    day_name: str
    routine_id: Optional[int]
    routine_name: Optional[str]


class ConfigurationResponse(BaseModel):
    routine_week: RoutineWeekHeader
    exercises: list[ExerciseConfigItem]


class ConfigurationExerciseInput(BaseModel):
    """One exercise of a configuration write; name and image are resolved server-side."""

    exercise_id: int
    sets_config: list[SetConfig] = Field(default_factory=list)
    notes: Optional[str] = None
    training_day_id: Optional[int] = None


class ConfigurationUpdate(BaseModel):
    """Full replacement of a slot's configuration.

    ``profile_id`` and ``exercises`` are checked by the service so that a
    missing or malformed value is reported as a rejected request (400)
    rather than a schema error.  Items are parsed only after the slot
    is known to belong to the profile.
    """

    profile_id: Optional[int] = None
    exercises: Optional[Any] = None
    routine_name: Optional[str] = Field(None, max_length=255)


class ConfigurationInitialize(BaseModel):
    profile_id: int
    training_day_id: int


class ConfigurationDeleteResponse(BaseModel):
    deleted_count: int


class ToggleState(BaseModel):
    exercise_index: int = Field(..., ge=0)
    set_index: int = Field(..., ge=0)
    technique: Technique
    enabled: bool = True


class ConfigurationValidateRequest(BaseModel):
    """Readiness check of an edited configuration.

    When ``toggles`` is omitted they are derived from the technique data
    already present in ``exercises``.
    """

    exercises: list[ExerciseConfigItem]
    toggles: Optional[list[ToggleState]] = None


class IncompleteSet(BaseModel):
    exercise_index: int
    set_index: int
    reason: str


class ConfigurationValidateResponse(BaseModel):
    ready: bool
    incomplete: list[IncompleteSet]
    toggles: list[ToggleState]
