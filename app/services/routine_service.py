"""
Routine service.

CRUD for a profile's routines and their ordered exercises.  Every read
and write is scoped to the owning profile; deleted routines are kept
with ``is_active`` cleared.
"""

import datetime
import logging

from sqlmodel import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.routine import RoutineRepository
from app.models.routine import Routine, RoutineExercise
from app.schemas.routine import (RoutineCreate, RoutineExerciseCreate, RoutineExerciseDetail, RoutineResponse,
                                 RoutineUpdate, )
from app.schemas.training_day import ExerciseSummary

logger = logging.getLogger(__name__)


class RoutineService:
    """Service for routine business logic."""

    def __init__(self, session: Session):
        self.repository = RoutineRepository(session)
        self.exercise_repo = ExerciseRepository(session)
        self.profile_repo = ProfileRepository(session)

    def create(self, data: RoutineCreate) -> RoutineResponse:
        if not self.profile_repo.get_by_id(data.profile_id):
            raise NotFoundError("Profile not found")

        items = self._build_exercises(data.exercises)
        routine = Routine(profile_id=data.profile_id, name=data.name, description=data.description,
                          is_favorite=data.is_favorite, )
        routine = self.repository.create_with_exercises(routine, items)

        logger.info("Created routine %s for profile %s (%d exercises)", routine.id, routine.profile_id, len(items))
        return self._to_response(routine)

    def get(self, routine_id: int, profile_id: int) -> RoutineResponse:
        return self._to_response(self._get_owned(routine_id, profile_id))

    def get_all_for_profile(self, profile_id: int) -> list[RoutineResponse]:
        return [self._to_response(routine) for routine in self.repository.get_active_by_profile(profile_id)]

    def update(self, routine_id: int, data: RoutineUpdate) -> RoutineResponse:
        routine = self._get_owned(routine_id, data.profile_id)
        items = self._build_exercises(data.exercises) if data.exercises is not None else None

        if data.name is not None:
            routine.name = data.name
        if data.description is not None:
            routine.description = data.description
        if data.is_favorite is not None:
            routine.is_favorite = data.is_favorite

        routine.updated_at = datetime.datetime.utcnow()
        routine = self.repository.update(routine, items)

        logger.info("Updated routine %s", routine.id)
        return self._to_response(routine)

    def delete(self, routine_id: int, profile_id: int) -> None:
        routine = self._get_owned(routine_id, profile_id)
        routine.is_active = False
        routine.updated_at = datetime.datetime.utcnow()
        self.repository.update(routine)
        logger.info("Deleted routine %s", routine.id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned(self, routine_id: int, profile_id: int) -> Routine:
        routine = self.repository.get_owned_active(routine_id, profile_id)
        if not routine:
            raise NotFoundError("Routine not found")
        return routine

    def _build_exercises(self, exercises: list[RoutineExerciseCreate]) -> list[RoutineExercise]:
        if not exercises:
            raise ValidationError("At least one exercise is required")

        catalogue = self.exercise_repo.get_by_ids(e.exercise_id for e in exercises)
        missing = sorted({ e.exercise_id for e in exercises if e.exercise_id not in catalogue })
        if missing:
            raise ValidationError(f"Invalid exercise IDs: {', '.join(str(i) for i in missing)}")

        return [RoutineExercise(exercise_id=e.exercise_id,
                                order_in_routine=e.order_in_routine if e.order_in_routine is not None else position,
                                sets=e.sets, reps=e.reps, weight=e.weight, rest_time_seconds=e.rest_time_seconds,
                                notes=e.notes, ) for position, e in enumerate(exercises)]

    def _to_response(self, routine: Routine) -> RoutineResponse:
        exercises = [RoutineExerciseDetail(exercise_id=item.exercise_id, order_in_routine=item.order_in_routine,
                                           sets=item.sets, reps=item.reps, weight=item.weight,
                                           rest_time_seconds=item.rest_time_seconds, notes=item.notes,
                                           exercise=ExerciseSummary(id=exercise.id, name=exercise.name,
                                                                    image=exercise.image), )
                     for item, exercise in self.repository.get_exercises(routine.id)]
        return RoutineResponse(id=routine.id, profile_id=routine.profile_id, name=routine.name,
                               description=routine.description, is_favorite=routine.is_favorite,
                               is_active=routine.is_active, exercise_count=len(exercises), exercises=exercises,
                               created_at=routine.created_at, updated_at=routine.updated_at, )
