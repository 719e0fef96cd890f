"""
Exercise catalogue service.
"""

import logging

from sqlmodel import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.db.repositories.exercise import ExerciseRepository
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseCreate, ExerciseUpdate

logger = logging.getLogger(__name__)


class ExerciseService:
    """Service for the shared exercise catalogue."""

    def __init__(self, session: Session):
        self.repository = ExerciseRepository(session)

    def create(self, data: ExerciseCreate) -> Exercise:
        return self.repository.create(Exercise(name=data.name, image=data.image, muscle_group=data.muscle_group))

    def get(self, exercise_id: int) -> Exercise:
        exercise = self.repository.get_by_id(exercise_id)
        if not exercise:
            raise NotFoundError("Exercise not found")
        return exercise

    def get_all(self) -> list[Exercise]:
        return self.repository.get_all()

    def update(self, exercise_id: int, data: ExerciseUpdate) -> Exercise:
        exercise = self.get(exercise_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(exercise, field, value)
        return self.repository.update(exercise)

    def delete(self, exercise_id: int) -> None:
        """Remove a catalogue entry that no training day or routine uses.

        Saved configurations and session history keep their own copy of
        the name and image, so they are unaffected.
        """
        exercise = self.get(exercise_id)
        if self.repository.is_referenced(exercise_id):
            raise ConflictError("Exercise is used by a training day or routine")
        self.repository.delete(exercise)
        logger.info("Deleted exercise %s", exercise_id)
