"""
Profile API schemas.
"""

import datetime

from pydantic import BaseModel, Field


class ProfileCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ProfileResponse(BaseModel):
    id: int
    name: str
    created_at: datetime.datetime

    class Config:
        from_attributes = True
