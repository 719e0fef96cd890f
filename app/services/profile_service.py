"""
Profile service.

Profiles are selected by id without authentication.
"""

import logging

from sqlmodel import Session

from app.core.exceptions import NotFoundError
from app.db.repositories.profile import ProfileRepository
from app.models.profile import Profile
from app.schemas.profile import ProfileCreate

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for profile management."""

    def __init__(self, session: Session):
        self.repository = ProfileRepository(session)

    def create(self, data: ProfileCreate) -> Profile:
        profile = self.repository.create(Profile(name=data.name))
        logger.info("Created profile %s", profile.id)
        return profile

    def get_all(self) -> list[Profile]:
        return self.repository.get_all()

    def get_or_raise(self, profile_id: int) -> Profile:
        """Get a profile by *profile_id*.

        Raises :class:`NotFoundError` if it does not exist.
        """
        profile = self.repository.get_by_id(profile_id)
        if not profile:
            raise NotFoundError("Profile not found")
        return profile
