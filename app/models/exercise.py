"""
Exercise catalogue model.

Exercises are shared by every profile; configurations and sessions copy
the name and image at the moment they are written.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Exercise(SQLModel, table=True):
    __tablename__ = "exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255, index=True)
    image: Optional[str] = Field(default=None, max_length=1000)
    muscle_group: Optional[str] = Field(default=None, max_length=100)

    created_at: datetime = Field(default_factory=datetime.utcnow)
