"""Exercise catalogue repository."""

from typing import Iterable, Optional

from sqlmodel import Session, select

from app.models.exercise import Exercise
from app.models.routine import RoutineExercise
from app.models.training_day import TrainingDayExercise


class ExerciseRepository:
    """Repository for Exercise database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, exercise: Exercise) -> Exercise:
        self.session.add(exercise)
        self.session.commit()
        self.session.refresh(exercise)
        return exercise

    def get_by_id(self, exercise_id: int) -> Optional[Exercise]:
        return self.session.get(Exercise, exercise_id)

    def get_by_ids(self, exercise_ids: Iterable[int]) -> dict[int, Exercise]:
        """Return ``{id: exercise}`` for the ids that exist."""
        ids = set(exercise_ids)
        if not ids:
            return { }
        statement = select(Exercise).where(Exercise.id.in_(ids))  # type: ignore[union-attr]
        return { e.id: e for e in self.session.exec(statement).all() }

    def get_all(self) -> list[Exercise]:
        statement = select(Exercise).order_by(Exercise.name)
        return list(self.session.exec(statement).all())

    def is_referenced(self, exercise_id: int) -> bool:
        """Whether a training day or routine still uses the exercise."""
        day_use = select(TrainingDayExercise.id).where(TrainingDayExercise.exercise_id == exercise_id)
        routine_use = select(RoutineExercise.id).where(RoutineExercise.exercise_id == exercise_id)
        return (self.session.exec(day_use).first() is not None
                or self.session.exec(routine_use).first() is not None)

    def update(self, exercise: Exercise) -> Exercise:
        self.session.add(exercise)
        self.session.commit()
        self.session.refresh(exercise)
        return exercise

    def delete(self, exercise: Exercise) -> None:
        self.session.delete(exercise)
        self.session.commit()
