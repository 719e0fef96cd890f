"""
Weekly schedule service.

Creates the seven week slots of a profile and assigns routines,
training days or rest days to them.

Assigning a training day creates a routine named after it (as the
schedule screen shows routines, not training days) and drops any saved
configuration, which belonged to the previous assignment.
"""

import datetime
import logging

from sqlmodel import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.routine import RoutineRepository
from app.db.repositories.routine_week import RoutineWeekRepository
from app.db.repositories.training_day import TrainingDayRepository
from app.models.routine import Routine
from app.models.routine_week import RoutineWeek
from app.planning.day_mapping import DAY_NAMES, id_to_name
from app.schemas.routine_week import RoutineWeekResponse, RoutineWeekUpdate

logger = logging.getLogger(__name__)


class RoutineWeekService:
    """Service for the weekly schedule."""

    def __init__(self, session: Session):
        self.repository = RoutineWeekRepository(session)
        self.profile_repo = ProfileRepository(session)
        self.routine_repo = RoutineRepository(session)
        self.training_day_repo = TrainingDayRepository(session)

    def initialize_for_profile(self, profile_id: int) -> list[RoutineWeekResponse]:
        """Create one slot per weekday (Domingo=1 ... Sábado=7)."""
        if not self.profile_repo.get_by_id(profile_id):
            raise NotFoundError("Profile not found")
        if self.repository.count_by_profile(profile_id) > 0:
            raise ConflictError("Routine weeks already initialized for this profile")

        weeks = [RoutineWeek(profile_id=profile_id, day_of_week=day_id, day_name=id_to_name(day_id))
                 for day_id in range(1, len(DAY_NAMES) + 1)]
        weeks = self.repository.create_many(weeks)

        logger.info("Initialized routine weeks for profile %s", profile_id)
        return [self._to_response(w) for w in weeks]

    def get_all_for_profile(self, profile_id: int) -> list[RoutineWeekResponse]:
        return [self._to_response(w) for w in self.repository.get_all_by_profile(profile_id)]

    def update(self, week_id: int, data: RoutineWeekUpdate) -> RoutineWeekResponse:
        week = self.repository.get_owned(week_id, data.profile_id)
        if not week:
            raise NotFoundError("Routine week not found")

        if data.routine_id is None and data.training_day_id is None and data.is_rest_day is None:
            raise ValidationError("No fields to update")

        if data.is_rest_day:
            week.is_rest_day = True
            self._clear_assignment(week)
        else:
            if data.is_rest_day is False:
                week.is_rest_day = False

            if data.routine_id is not None:
                routine = self.routine_repo.get_owned_active(data.routine_id, data.profile_id)
                if not routine:
                    raise NotFoundError("Routine not found")
                self._clear_assignment(week)
                week.routine_id = routine.id
                week.routine_name = routine.name
                week.is_rest_day = False
            elif data.training_day_id is not None:
                day = self.training_day_repo.get_owned_active(data.training_day_id, data.profile_id)
                if not day:
                    raise NotFoundError("Training day not found")
                description = f"Rutina creada automáticamente desde {day.name}"
                routine = self.routine_repo.create(Routine(profile_id=data.profile_id, name=f"Rutina - {day.name}",
                                                           description=description, ))
                self._clear_assignment(week)
                week.routine_id = routine.id
                week.routine_name = day.name
                week.training_day_id = day.id
                week.is_rest_day = False

        week.updated_at = datetime.datetime.utcnow()
        week = self.repository.update(week)
        return self._to_response(week)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _clear_assignment(week: RoutineWeek) -> None:
        week.routine_id = None
        week.routine_name = None
        week.training_day_id = None
        week.exercises_config = None

    @staticmethod
    def _to_response(week: RoutineWeek) -> RoutineWeekResponse:
        return RoutineWeekResponse(id=week.id, profile_id=week.profile_id, day_of_week=week.day_of_week,
                                   day_name=id_to_name(week.day_of_week), is_rest_day=week.is_rest_day,
                                   routine_id=week.routine_id, routine_name=week.routine_name,
                                   training_day_id=week.training_day_id, has_configuration=week.has_configuration,
                                   created_at=week.created_at, updated_at=week.updated_at, )
