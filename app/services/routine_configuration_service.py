"""
Routine configuration service.

Loads, replaces and resets the exercise configuration of a week slot.

**Read**::

    saved exercises_config (non-empty)  -> returned as stored
    otherwise, training day assigned    -> template built from its exercises
    otherwise                           -> []

**Write** is a *full replace*: the submitted list becomes the whole
configuration and nothing of the previous one survives.  Callers must
resend every exercise on each update.  There is no version stamp, so
two editors of the same slot overwrite each other; clients re-fetch
before editing.

Ownership is always checked against the stored row: a slot that belongs
to another profile is reported exactly like a missing one.
"""

import datetime
import logging
from typing import Any, Optional, Sequence

from pydantic import ValidationError as SchemaValidationError
from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.routine_week import RoutineWeekRepository
from app.db.repositories.training_day import TrainingDayRepository
from app.models.routine_week import RoutineWeek
from app.planning.templates import build_template
from app.planning.toggles import ToggleKey, derive_toggles
from app.planning.validation import find_incomplete_sets, is_configuration_ready
from app.schemas.routine_week import (ConfigurationExerciseInput, ConfigurationResponse,
                                      ConfigurationValidateRequest, ConfigurationValidateResponse, IncompleteSet,
                                      RoutineWeekHeader, ToggleState, )
from app.schemas.set_config import ExerciseConfigItem
from app.services.training_day_service import TrainingDayService

logger = logging.getLogger(__name__)


class RoutineConfigurationService:
    """Service for week slot exercise configurations."""

    def __init__(self, session: Session):
        self.week_repo = RoutineWeekRepository(session)
        self.training_day_repo = TrainingDayRepository(session)
        self.exercise_repo = ExerciseRepository(session)
        self.training_day_service = TrainingDayService(session)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_configuration(self, week_id: int, profile_id: Optional[int]) -> ConfigurationResponse:
        week = self._get_owned_week(week_id, profile_id)

        if week.exercises_config:
            exercises = [ExerciseConfigItem.model_validate(item) for item in week.exercises_config]
        elif week.training_day_id is not None:
            exercises = build_template(self.training_day_service.get_exercise_details(week.training_day_id))
        else:
            exercises = []

        return ConfigurationResponse(routine_week=RoutineWeekHeader(id=week.id, day_name=week.day_name,
                                                                    routine_id=week.routine_id,
                                                                    routine_name=week.routine_name, ),
                                     exercises=exercises, )

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def initialize_configuration(self, week_id: int, profile_id: Optional[int],
                                 training_day_id: Optional[int], ) -> list[ExerciseConfigItem]:
        """Persist the default template of *training_day_id* as the slot's configuration."""
        if not training_day_id:
            raise ValidationError("profile_id and training_day_id are required")
        week = self._get_owned_week(week_id, profile_id)

        day = self.training_day_repo.get_owned_active(training_day_id, week.profile_id)
        if not day:
            raise NotFoundError("Training day not found")

        template = build_template(self.training_day_service.get_exercise_details(day.id))

        week.is_rest_day = False
        week.training_day_id = day.id
        week.routine_name = day.name
        week.exercises_config = [item.to_storage() for item in template]
        week.updated_at = datetime.datetime.utcnow()
        self.week_repo.update(week)

        logger.info("Initialized configuration of routine week %s from training day %s (%d exercises)", week.id,
                    day.id, len(template))
        return template

    def update_configuration(self, week_id: int, profile_id: Optional[int], exercises: Any,
                             routine_name: Optional[str] = None, ) -> list[ExerciseConfigItem]:
        """Replace the slot's whole configuration with *exercises*.

        Returns the normalised list that was stored: names and images
        come from the exercise catalogue, ``order_index`` is the list
        position and missing notes become ``""``.
        """
        if not profile_id or not isinstance(exercises, list):
            raise ValidationError("profile_id and exercises array are required")

        week = self._get_owned_week(week_id, profile_id)
        items = self._parse_exercise_inputs(exercises)

        catalogue = self.exercise_repo.get_by_ids(item.exercise_id for item in items)
        config: list[ExerciseConfigItem] = []
        for position, item in enumerate(items):
            exercise = catalogue.get(item.exercise_id)
            if exercise is None:
                raise ValidationError(f"Exercise with ID {item.exercise_id} not found")
            config.append(ExerciseConfigItem(exercise_id=exercise.id, exercise_name=exercise.name,
                                             exercise_image=exercise.image or "", order_index=position,
                                             sets_config=item.sets_config, notes=item.notes or "", ))

        training_day_id = items[0].training_day_id if items else None
        training_day_name = None
        if training_day_id is not None:
            day = self.training_day_repo.get_owned_active(training_day_id, week.profile_id)
            if not day:
                raise ValidationError(f"Training day with ID {training_day_id} not found")
            training_day_name = day.name

        week.routine_name = self._resolve_routine_name(bool(items), routine_name, training_day_name)
        week.training_day_id = training_day_id
        week.exercises_config = [item.to_storage() for item in config]
        week.updated_at = datetime.datetime.utcnow()
        self.week_repo.update(week)

        logger.info("Replaced configuration of routine week %s (%d exercises)", week.id, len(config))
        return config

    def delete_configuration(self, week_id: int, profile_id: Optional[int]) -> int:
        """Reset the slot's routine, training day and configuration.

        Returns the number of rows affected; 0 means there was no such
        slot for this profile and is not an error.
        """
        if not profile_id:
            raise ValidationError("profile_id is required")
        count = self.week_repo.reset_configuration(week_id, profile_id)
        if count:
            logger.info("Deleted configuration of routine week %s", week_id)
        return count

    # ------------------------------------------------------------------
    # Readiness
    # ------------------------------------------------------------------

    def validate_for_week(self, week_id: int, profile_id: Optional[int],
                          data: ConfigurationValidateRequest, ) -> ConfigurationValidateResponse:
        """:meth:`validate_configuration` for an edit of a slot the profile owns."""
        self._get_owned_week(week_id, profile_id)
        return self.validate_configuration(data)

    @staticmethod
    def validate_configuration(data: ConfigurationValidateRequest) -> ConfigurationValidateResponse:
        """Check whether an edited configuration is complete enough to submit.

        Toggles are derived from the configuration when the request does
        not carry them.
        """
        if data.toggles is None:
            toggles = derive_toggles(data.exercises)
        else:
            toggles = { ToggleKey(t.exercise_index, t.set_index, t.technique): t.enabled for t in data.toggles }

        incomplete = find_incomplete_sets(data.exercises, toggles)
        return ConfigurationValidateResponse(ready=is_configuration_ready(data.exercises, toggles),
                                             incomplete=[IncompleteSet(exercise_index=ref.exercise_index,
                                                                       set_index=ref.set_index, reason=ref.reason, )
                                                         for ref in incomplete],
                                             toggles=[ToggleState(exercise_index=key.exercise_index,
                                                                  set_index=key.set_index,
                                                                  technique=key.technique, enabled=enabled, )
                                                      for key, enabled in sorted(toggles.items()) if enabled], )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_week(self, week_id: int, profile_id: Optional[int]) -> RoutineWeek:
        if not profile_id:
            raise ValidationError("profile_id is required")
        week = self.week_repo.get_owned(week_id, profile_id)
        if not week:
            raise NotFoundError("Routine week not found")
        return week

    @staticmethod
    def _parse_exercise_inputs(exercises: Sequence[Any]) -> list[ConfigurationExerciseInput]:
        try:
            return [item if isinstance(item, ConfigurationExerciseInput) else ConfigurationExerciseInput.model_validate(
                item) for item in exercises]
        except SchemaValidationError as e:
            raise ValidationError(f"Invalid exercises: {e}") from e

    @staticmethod
    def _resolve_routine_name(has_exercises: bool, override: Optional[str],
                              training_day_name: Optional[str], ) -> Optional[str]:
        if not has_exercises:
            return None
        return override or training_day_name or settings.DEFAULT_ROUTINE_NAME
