"""
Exercise catalogue API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ExerciseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    image: Optional[str] = Field(None, max_length=1000)
    muscle_group: Optional[str] = Field(None, max_length=100)


class ExerciseUpdate(BaseModel):
    """Partial update of a catalogue entry."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    image: Optional[str] = Field(None, max_length=1000)
    muscle_group: Optional[str] = Field(None, max_length=100)


class ExerciseResponse(BaseModel):
    id: int
    name: str
    image: Optional[str]
    muscle_group: Optional[str]
    created_at: datetime.datetime

    class Config:
        from_attributes = True
