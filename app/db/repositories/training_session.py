"""
Training session repository.

Handles database operations for :class:`TrainingSession`.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.core.enums import SessionStatus
from app.models.training_session import TrainingSession

# Statuses of a session that is still in progress
_LIVE_STATUSES = (SessionStatus.ACTIVE, SessionStatus.PAUSED)
_FINISHED_STATUSES = (SessionStatus.COMPLETED, SessionStatus.CANCELLED)


class TrainingSessionRepository:
    """Repository for TrainingSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[TrainingSession]:
        return self.session.get(TrainingSession, entry_id)

    def get_live_by_profile(self, profile_id: int) -> Optional[TrainingSession]:
        """The profile's active or paused session, if any."""
        statement = (select(TrainingSession)
                     .where(TrainingSession.profile_id == profile_id,
                            TrainingSession.status.in_(_LIVE_STATUSES), )  # type: ignore[union-attr]
                     .order_by(TrainingSession.start_time.desc()))  # type: ignore[union-attr]
        return self.session.exec(statement).first()

    def get_by_profile(self, profile_id: int, status: Optional[SessionStatus] = None, ) -> list[TrainingSession]:
        statement = select(TrainingSession).where(TrainingSession.profile_id == profile_id)
        if status is not None:
            statement = statement.where(TrainingSession.status == status)
        statement = statement.order_by(TrainingSession.start_time.desc())  # type: ignore[union-attr]
        return list(self.session.exec(statement).all())

    def get_finished_by_profile(self, profile_id: int, session_date: Optional[datetime.date] = None,
                                limit: Optional[int] = None, ) -> list[TrainingSession]:
        """Completed or cancelled sessions, newest first, optionally limited to the day they started."""
        statement = (select(TrainingSession)
                     .where(TrainingSession.profile_id == profile_id,
                            TrainingSession.status.in_(_FINISHED_STATUSES), ))  # type: ignore[union-attr]
        if session_date is not None:
            day_start = datetime.datetime.combine(session_date, datetime.time.min)
            statement = statement.where(TrainingSession.start_time >= day_start,
                                        TrainingSession.start_time < day_start + datetime.timedelta(days=1), )
        statement = statement.order_by(TrainingSession.start_time.desc())  # type: ignore[union-attr]
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete_many(self, entries: list[TrainingSession]) -> None:
        for entry in entries:
            self.session.delete(entry)
        self.session.commit()
