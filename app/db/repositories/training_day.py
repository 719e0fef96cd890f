"""
Training day repository.

Handles training days and their ordered exercise assignments.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.exercise import Exercise
from app.models.training_day import TrainingDay, TrainingDayExercise


class TrainingDayRepository:
    """Repository for TrainingDay database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create_with_exercises(self, day: TrainingDay, assignments: list[TrainingDayExercise], ) -> TrainingDay:
        """Insert a training day and its assignments in one transaction."""
        self.session.add(day)
        self.session.flush()
        for assignment in assignments:
            assignment.training_day_id = day.id
            self.session.add(assignment)
        self.session.commit()
        self.session.refresh(day)
        return day

    def get_by_id(self, day_id: int) -> Optional[TrainingDay]:
        return self.session.get(TrainingDay, day_id)

    def get_owned_active(self, day_id: int, profile_id: int) -> Optional[TrainingDay]:
        statement = select(TrainingDay).where(TrainingDay.id == day_id, TrainingDay.profile_id == profile_id,
                                              TrainingDay.is_active == True,  # noqa: E712
                                              )
        return self.session.exec(statement).first()

    def get_active_by_profile(self, profile_id: int) -> list[TrainingDay]:
        statement = (select(TrainingDay).where(TrainingDay.profile_id == profile_id,
                                               TrainingDay.is_active == True,  # noqa: E712
                                               ).order_by(TrainingDay.name))
        return list(self.session.exec(statement).all())

    def get_exercises(self, day_id: int) -> list[tuple[TrainingDayExercise, Exercise]]:
        """Return the day's assignments joined with their exercise, in ``order_index`` order."""
        statement = (select(TrainingDayExercise, Exercise).join(Exercise,
                                                                 TrainingDayExercise.exercise_id == Exercise.id).where(
            TrainingDayExercise.training_day_id == day_id).order_by(TrainingDayExercise.order_index,
                                                                   TrainingDayExercise.id))
        return [(assignment, exercise) for assignment, exercise in self.session.exec(statement).all()]

    def update(self, day: TrainingDay) -> TrainingDay:
        self.session.add(day)
        self.session.commit()
        self.session.refresh(day)
        return day

    def replace_exercises(self, day: TrainingDay, assignments: list[TrainingDayExercise]) -> TrainingDay:
        """Save *day* with *assignments* replacing its current ones, in one transaction."""
        self.session.add(day)
        current = self.session.exec(select(TrainingDayExercise).where(TrainingDayExercise.training_day_id == day.id))
        for assignment in current.all():
            self.session.delete(assignment)
        self.session.flush()
        for assignment in assignments:
            assignment.training_day_id = day.id
            self.session.add(assignment)
        self.session.commit()
        self.session.refresh(day)
        return day
