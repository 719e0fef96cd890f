"""Profile repository."""

from typing import Optional

from sqlmodel import Session, select

from app.models.profile import Profile


class ProfileRepository:
    """Repository for Profile database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, profile: Profile) -> Profile:
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def get_by_id(self, profile_id: int) -> Optional[Profile]:
        return self.session.get(Profile, profile_id)

    def get_all(self) -> list[Profile]:
        statement = select(Profile).order_by(Profile.id)
        return list(self.session.exec(statement).all())
