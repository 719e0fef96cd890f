"""
Routine repository.

Handles routines and their ordered exercise lists.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.exercise import Exercise
from app.models.routine import Routine, RoutineExercise


class RoutineRepository:
    """Repository for Routine database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, routine: Routine) -> Routine:
        self.session.add(routine)
        self.session.commit()
        self.session.refresh(routine)
        return routine

    def create_with_exercises(self, routine: Routine, exercises: list[RoutineExercise]) -> Routine:
        """Insert a routine and its exercises in one transaction."""
        self.session.add(routine)
        self.session.flush()
        for item in exercises:
            item.routine_id = routine.id
            self.session.add(item)
        self.session.commit()
        self.session.refresh(routine)
        return routine

    def get_owned_active(self, routine_id: int, profile_id: int) -> Optional[Routine]:
        statement = select(Routine).where(Routine.id == routine_id, Routine.profile_id == profile_id,
                                          Routine.is_active == True,  # noqa: E712
                                          )
        return self.session.exec(statement).first()

    def get_active_by_profile(self, profile_id: int) -> list[Routine]:
        """Favourites first, then newest first."""
        statement = (select(Routine).where(Routine.profile_id == profile_id,
                                           Routine.is_active == True,  # noqa: E712
                                           ).order_by(Routine.is_favorite.desc(),  # type: ignore[attr-defined]
                                                      Routine.created_at.desc(),  # type: ignore[attr-defined]
                                                      Routine.id.desc(),  # type: ignore[union-attr]
                                                      ))
        return list(self.session.exec(statement).all())

    def get_exercises(self, routine_id: int) -> list[tuple[RoutineExercise, Exercise]]:
        """Return the routine's exercises joined with the catalogue, in ``order_in_routine`` order."""
        statement = (select(RoutineExercise, Exercise).join(Exercise, RoutineExercise.exercise_id == Exercise.id)
                     .where(RoutineExercise.routine_id == routine_id)
                     .order_by(RoutineExercise.order_in_routine, RoutineExercise.id))
        return [(item, exercise) for item, exercise in self.session.exec(statement).all()]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, routine: Routine, exercises: Optional[list[RoutineExercise]] = None) -> Routine:
        """Save *routine*; when *exercises* is given it replaces the current list."""
        self.session.add(routine)
        if exercises is not None:
            current = self.session.exec(select(RoutineExercise).where(RoutineExercise.routine_id == routine.id))
            for item in current.all():
                self.session.delete(item)
            self.session.flush()
            for item in exercises:
                item.routine_id = routine.id
                self.session.add(item)
        self.session.commit()
        self.session.refresh(routine)
        return routine
