"""
Routine API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.training_day import ExerciseSummary


class RoutineExerciseCreate(BaseModel):
    exercise_id: int
    order_in_routine: Optional[int] = None
    sets: int = Field(3, ge=1, le=20)
    reps: int = Field(12, ge=0)
    weight: Optional[float] = Field(None, ge=0)
    rest_time_seconds: int = Field(60, ge=0)
    notes: Optional[str] = Field(None, max_length=1000)


class RoutineCreate(BaseModel):
    """Schema for creating a routine; at least one exercise is required."""

    profile_id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    is_favorite: bool = False
    exercises: list[RoutineExerciseCreate] = Field(default_factory=list)


class RoutineUpdate(BaseModel):
    """Partial update.  A given ``exercises`` list replaces the routine's exercises."""

    profile_id: int
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    is_favorite: Optional[bool] = None
    exercises: Optional[list[RoutineExerciseCreate]] = None


class RoutineExerciseDetail(BaseModel):
    exercise_id: int
    order_in_routine: int
    sets: int = 3
    reps: int = 12
    weight: Optional[float] = None
    rest_time_seconds: int = 60
    notes: Optional[str] = None
    exercise: ExerciseSummary


class RoutineResponse(BaseModel):
    id: int
    profile_id: int
    name: str
    description: Optional[str]
    is_favorite: bool
    is_active: bool
    exercise_count: int
    exercises: list[RoutineExerciseDetail]
    created_at: datetime.datetime
    updated_at: datetime.datetime
