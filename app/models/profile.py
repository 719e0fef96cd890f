"""
Profile database model.

Profiles are switched without authentication; every owned row
(week slots, training days, routines, sessions) carries a ``profile_id``.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Profile(SQLModel, table=True):
    """A person whose schedule and sessions are tracked."""

    __tablename__ = "profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=100)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
