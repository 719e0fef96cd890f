"""
Training day API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ExerciseSummary(BaseModel):
    """Exercise reference embedded in a training day assignment."""

    id: int
    name: str
    image: Optional[str] = None


class TrainingDayExerciseCreate(BaseModel):
    exercise_id: int
    order_index: Optional[int] = None
    sets: int = Field(3, ge=1, le=20)
    reps: int = Field(10, ge=0)
    weight: Optional[float] = Field(None, ge=0)
    rest_seconds: int = Field(60, ge=0)
    notes: Optional[str] = Field(None, max_length=1000)


class TrainingDayCreate(BaseModel):
    """Schema for creating a training day with its exercises."""

    profile_id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    exercises: list[TrainingDayExerciseCreate] = Field(default_factory=list)


class TrainingDayUpdate(BaseModel):
    """Partial update.  A given ``exercises`` list replaces the day's assignments."""

    profile_id: int
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    exercises: Optional[list[TrainingDayExerciseCreate]] = None


class TrainingDayExerciseDetail(BaseModel):
    """An exercise assignment together with the exercise it references."""

    exercise_id: int
    order_index: int
    sets: int = 3
    reps: int = 10
    weight: Optional[float] = None
    rest_seconds: int = 60
    notes: Optional[str] = None
    exercise: ExerciseSummary


class TrainingDayResponse(BaseModel):
    id: int
    profile_id: int
    name: str
    description: Optional[str]
    is_active: bool
    exercises: list[TrainingDayExerciseDetail]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
