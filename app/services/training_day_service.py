"""
Training day service.

Creates training days with their ordered exercise assignments and
exposes them as :class:`TrainingDayExerciseDetail` lists, the input of
the configuration template builder.
"""

import datetime
import logging

from sqlmodel import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.training_day import TrainingDayRepository
from app.models.training_day import TrainingDay, TrainingDayExercise
from app.schemas.training_day import (ExerciseSummary, TrainingDayCreate, TrainingDayExerciseCreate,
                                      TrainingDayExerciseDetail, TrainingDayResponse, TrainingDayUpdate, )

logger = logging.getLogger(__name__)


class TrainingDayService:
    """Service for training day business logic."""

    def __init__(self, session: Session):
        self.repository = TrainingDayRepository(session)
        self.exercise_repo = ExerciseRepository(session)
        self.profile_repo = ProfileRepository(session)

    def create(self, data: TrainingDayCreate) -> TrainingDayResponse:
        if not self.profile_repo.get_by_id(data.profile_id):
            raise NotFoundError("Profile not found")

        assignments = self._build_assignments(data.exercises)
        day = TrainingDay(profile_id=data.profile_id, name=data.name, description=data.description)
        day = self.repository.create_with_exercises(day, assignments)

        logger.info("Created training day %s for profile %s (%d exercises)", day.id, day.profile_id,
                    len(assignments))
        return self._to_response(day)

    def get(self, day_id: int, profile_id: int) -> TrainingDayResponse:
        return self._to_response(self._get_owned(day_id, profile_id))

    def get_all_for_profile(self, profile_id: int) -> list[TrainingDayResponse]:
        return [self._to_response(day) for day in self.repository.get_active_by_profile(profile_id)]

    def update(self, day_id: int, data: TrainingDayUpdate) -> TrainingDayResponse:
        day = self._get_owned(day_id, data.profile_id)
        assignments = self._build_assignments(data.exercises) if data.exercises is not None else None
        if data.name is not None:
            day.name = data.name
        if data.description is not None:
            day.description = data.description
        day.updated_at = datetime.datetime.utcnow()

        if assignments is None:
            day = self.repository.update(day)
        else:
            day = self.repository.replace_exercises(day, assignments)

        logger.info("Updated training day %s", day.id)
        return self._to_response(day)

    def delete(self, day_id: int, profile_id: int) -> None:
        day = self._get_owned(day_id, profile_id)
        day.is_active = False
        day.updated_at = datetime.datetime.utcnow()
        self.repository.update(day)
        logger.info("Deleted training day %s", day.id)

    def get_exercise_details(self, day_id: int) -> list[TrainingDayExerciseDetail]:
        """The day's exercise assignments, in ``order_index`` order."""
        return [TrainingDayExerciseDetail(exercise_id=assignment.exercise_id, order_index=assignment.order_index,
                                          sets=assignment.sets, reps=assignment.reps, weight=assignment.weight,
                                          rest_seconds=assignment.rest_seconds, notes=assignment.notes,
                                          exercise=ExerciseSummary(id=exercise.id, name=exercise.name,
                                                                   image=exercise.image), )
                for assignment, exercise in self.repository.get_exercises(day_id)]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned(self, day_id: int, profile_id: int) -> TrainingDay:
        day = self.repository.get_owned_active(day_id, profile_id)
        if not day:
            raise NotFoundError("Training day not found")
        return day

    def _build_assignments(self, exercises: list[TrainingDayExerciseCreate]) -> list[TrainingDayExercise]:
        catalogue = self.exercise_repo.get_by_ids(e.exercise_id for e in exercises)
        missing = [e.exercise_id for e in exercises if e.exercise_id not in catalogue]
        if missing:
            raise ValidationError(f"Exercise with ID {missing[0]} not found")
        return [TrainingDayExercise(exercise_id=e.exercise_id,
                                    order_index=e.order_index if e.order_index is not None else position,
                                    sets=e.sets, reps=e.reps, weight=e.weight, rest_seconds=e.rest_seconds,
                                    notes=e.notes, ) for position, e in enumerate(exercises)]

    def _to_response(self, day: TrainingDay) -> TrainingDayResponse:
        return TrainingDayResponse(id=day.id, profile_id=day.profile_id, name=day.name, description=day.description,
                                   is_active=day.is_active, exercises=self.get_exercise_details(day.id),
                                   created_at=day.created_at, updated_at=day.updated_at, )
