"""
Week slot repository.

Every lookup is scoped by ``profile_id``: a slot owned by another
profile is indistinguishable from a missing one.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.routine_week import RoutineWeek


class RoutineWeekRepository:
    """Repository for RoutineWeek database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create_many(self, weeks: list[RoutineWeek]) -> list[RoutineWeek]:
        for week in weeks:
            self.session.add(week)
        self.session.commit()
        for week in weeks:
            self.session.refresh(week)
        return weeks

    def get_owned(self, week_id: int, profile_id: int) -> Optional[RoutineWeek]:
        statement = select(RoutineWeek).where(RoutineWeek.id == week_id, RoutineWeek.profile_id == profile_id)
        return self.session.exec(statement).first()

    def get_all_by_profile(self, profile_id: int) -> list[RoutineWeek]:
        statement = (select(RoutineWeek).where(RoutineWeek.profile_id == profile_id).order_by(RoutineWeek.day_of_week))
        return list(self.session.exec(statement).all())

    def count_by_profile(self, profile_id: int) -> int:
        statement = (select(func.count()).select_from(RoutineWeek).where(RoutineWeek.profile_id == profile_id))
        return self.session.exec(statement).first() or 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, week: RoutineWeek) -> RoutineWeek:
        self.session.add(week)
        self.session.commit()
        self.session.refresh(week)
        return week

    def reset_configuration(self, week_id: int, profile_id: int) -> int:
        """Clear the slot's routine, training day and configuration.

        Returns the number of rows affected (0 when the slot is not owned).
        """
        week = self.get_owned(week_id, profile_id)
        if not week:
            return 0
        week.routine_id = None
        week.routine_name = None
        week.training_day_id = None
        week.exercises_config = None
        week.updated_at = datetime.datetime.utcnow()
        self.update(week)
        return 1
