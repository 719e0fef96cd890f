"""
Shared API dependencies.

Reusable FastAPI dependencies for profile resolution and database access.
Profiles are switched freely by the client; there is no authentication.
"""

from fastapi import Depends, Query
from sqlmodel import Session

from app.db.session import get_db
from app.models.profile import Profile
from app.services.profile_service import ProfileService


def get_current_profile(profile_id: int = Query(..., description="Acting profile"),
                        db: Session = Depends(get_db), ) -> Profile:
    """Resolve the ``profile_id`` query parameter to an existing profile."""
    return ProfileService(db).get_or_raise(profile_id)
