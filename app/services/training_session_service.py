"""
Training session service.

Starts live sessions from a week slot (or an explicit exercise list),
records performed sets, moves the current exercise pointer and drives
the status machine defined in :mod:`app.planning.session_progress`.

A profile has at most one live (active or paused) session.  Finished
sessions (completed or cancelled) are kept for history and can no longer
change; they can only be removed from it.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.core.enums import SessionStatus
from app.core.exceptions import ConflictError, InvalidSessionStateError, NotFoundError, ValidationError
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.routine_week import RoutineWeekRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.models.training_session import TrainingSession
from app.planning.day_mapping import id_to_name, name_to_id
from app.planning.session_progress import (TERMINAL_STATUSES, advance_exercise_index, all_planned_sets_performed,
                                           compute_progress, ensure_active, record_performed_set, transition, )
from app.schemas.training_session import (DeletedSession, PerformedSet, SessionComplete, SessionProgress,
                                          SessionSummary, SetProgressUpdate, TrainingSessionCreate,
                                          TrainingSessionExercise, TrainingSessionResponse, )
from app.services.routine_configuration_service import RoutineConfigurationService

logger = logging.getLogger(__name__)


def _now() -> datetime.datetime:
    return datetime.datetime.utcnow()


class TrainingSessionService:
    """Service for live training sessions."""

    def __init__(self, session: Session):
        self.repository = TrainingSessionRepository(session)
        self.profile_repo = ProfileRepository(session)
        self.week_repo = RoutineWeekRepository(session)
        self.configuration_service = RoutineConfigurationService(session)

    # ------------------------------------------------------------------
    # Start / read
    # ------------------------------------------------------------------

    def start(self, data: TrainingSessionCreate) -> TrainingSessionResponse:
        if not self.profile_repo.get_by_id(data.profile_id):
            raise NotFoundError("Profile not found")

        if self.repository.get_live_by_profile(data.profile_id):
            raise ConflictError("Active session already exists; complete or cancel it before starting a new one")

        week = None
        if data.routine_week_id is not None:
            week = self.week_repo.get_owned(data.routine_week_id, data.profile_id)
            if not week:
                raise NotFoundError("Routine week not found")

        if data.exercises:
            exercises = [TrainingSessionExercise(exercise_id=e.exercise_id, exercise_name=e.exercise_name,
                                                 exercise_image=e.exercise_image or "", order_in_session=position,
                                                 sets_config=e.sets_config, )
                         for position, e in enumerate(data.exercises, start=1)]
        elif week is not None:
            configuration = self.configuration_service.get_configuration(week.id, data.profile_id)
            exercises = [TrainingSessionExercise(exercise_id=item.exercise_id, exercise_name=item.exercise_name,
                                                 exercise_image=item.exercise_image, order_in_session=position,
                                                 sets_config=item.sets_config, )
                         for position, item in enumerate(configuration.exercises, start=1)]
        else:
            exercises = []

        if not exercises:
            raise ValidationError("A training session needs at least one exercise")

        if data.day_of_week is not None:
            day_of_week = data.day_of_week
        elif week is not None:
            day_of_week = week.day_of_week
        else:
            day_of_week = name_to_id(data.day_name)

        routine_name = data.routine_name or (week.routine_name if week else None) or settings.DEFAULT_ROUTINE_NAME

        now = _now()
        entry = TrainingSession(profile_id=data.profile_id, routine_week_id=week.id if week else None,
                                routine_name=routine_name, day_of_week=day_of_week,
                                day_name=id_to_name(day_of_week), status=SessionStatus.ACTIVE,
                                current_exercise_index=0, start_time=now, last_activity=now,
                                exercises=self._dump_exercises(exercises), )
        entry = self.repository.create(entry)

        logger.info("Started training session %s for profile %s: %s - %s", entry.id, entry.profile_id,
                    entry.routine_name, entry.day_name)
        return self._to_response(entry)

    def get(self, session_id: int, profile_id: int) -> TrainingSessionResponse:
        return self._to_response(self._get_owned_entry(session_id, profile_id))

    def get_live(self, profile_id: int) -> Optional[TrainingSessionResponse]:
        entry = self.repository.get_live_by_profile(profile_id)
        return self._to_response(entry) if entry else None

    def get_all(self, profile_id: int, status: Optional[SessionStatus] = None, ) -> list[TrainingSessionResponse]:
        return [self._to_response(e) for e in self.repository.get_by_profile(profile_id, status)]

    def get_progress(self, session_id: int, profile_id: int) -> SessionProgress:
        entry = self._get_owned_entry(session_id, profile_id)
        return self._progress(entry, _now())

    # ------------------------------------------------------------------
    # Set progress
    # ------------------------------------------------------------------

    def record_set(self, session_id: int, profile_id: int, data: SetProgressUpdate, ) -> TrainingSessionResponse:
        """Store a performed set, replacing any earlier entry with the same ``set_number``.

        The exercise is marked completed once every planned set has been
        performed.
        """
        entry = self._get_owned_entry(session_id, profile_id)
        ensure_active(entry.status, "record a set")

        exercises = self._load_exercises(entry)
        exercise = self._find_exercise(exercises, data.exercise_id)
        if exercise.sets_config and data.set_number > len(exercise.sets_config):
            raise ValidationError(f"Set {data.set_number} is not planned; exercise has "
                                  f"{len(exercise.sets_config)} sets")

        performed = PerformedSet(**data.model_dump(exclude={ "exercise_id", "current_exercise_index" }))
        exercise.performed_sets = record_performed_set(exercise.performed_sets, performed)
        if all_planned_sets_performed(exercise):
            exercise.is_completed = True

        if data.current_exercise_index is not None:
            entry.current_exercise_index = advance_exercise_index(entry.status, entry.current_exercise_index,
                                                                  len(exercises), data.current_exercise_index, )

        entry.exercises = self._dump_exercises(exercises)
        entry.last_activity = _now()
        entry = self.repository.update(entry)
        return self._to_response(entry)

    def complete_exercise(self, session_id: int, profile_id: int, exercise_id: int) -> TrainingSessionResponse:
        entry = self._get_owned_entry(session_id, profile_id)
        ensure_active(entry.status, "complete an exercise")

        exercises = self._load_exercises(entry)
        self._find_exercise(exercises, exercise_id).is_completed = True

        entry.exercises = self._dump_exercises(exercises)
        entry.last_activity = _now()
        entry = self.repository.update(entry)
        return self._to_response(entry)

    def advance(self, session_id: int, profile_id: int) -> TrainingSessionResponse:
        entry = self._get_owned_entry(session_id, profile_id)
        entry.current_exercise_index = advance_exercise_index(entry.status, entry.current_exercise_index,
                                                              len(entry.exercises), )
        entry.last_activity = _now()
        entry = self.repository.update(entry)
        return self._to_response(entry)

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def pause(self, session_id: int, profile_id: int) -> TrainingSessionResponse:
        return self._move(session_id, profile_id, SessionStatus.PAUSED)

    def resume(self, session_id: int, profile_id: int) -> TrainingSessionResponse:
        return self._move(session_id, profile_id, SessionStatus.ACTIVE)

    def cancel(self, session_id: int, profile_id: int) -> TrainingSessionResponse:
        return self._move(session_id, profile_id, SessionStatus.CANCELLED)

    def complete(self, session_id: int, profile_id: int, data: SessionComplete) -> SessionSummary:
        entry = self._get_owned_entry(session_id, profile_id)
        entry.status = transition(entry.status, SessionStatus.COMPLETED)

        now = _now()
        entry.last_activity = now
        entry.end_time = now
        if data.notes is not None:
            entry.notes = data.notes
        if data.rating is not None:
            entry.rating = data.rating
        entry = self.repository.update(entry)

        progress = self._progress(entry, now)
        logger.info("Completed training session %s: %d/%d sets in %d min", entry.id, progress.completed_sets,
                    progress.total_sets, progress.duration_minutes)
        return SessionSummary(**progress.model_dump(), start_time=entry.start_time, end_time=entry.end_time)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def get_history(self, profile_id: int, session_date: Optional[datetime.date] = None,
                    limit: int = 50, ) -> list[TrainingSessionResponse]:
        """Finished sessions, newest first.

        With *session_date* every session started that day is returned and
        *limit* is ignored.
        """
        if session_date is None and not 1 <= limit <= 1000:
            raise ValidationError("limit must be between 1 and 1000")
        entries = self.repository.get_finished_by_profile(profile_id, session_date,
                                                          None if session_date is not None else limit, )
        return [self._to_response(e) for e in entries]

    def delete_finished(self, session_id: int, profile_id: int) -> DeletedSession:
        entry = self._get_owned_entry(session_id, profile_id)
        if entry.status not in TERMINAL_STATUSES:
            raise InvalidSessionStateError(f"Cannot delete a {entry.status.value} session; finish it first")

        deleted = self._to_deleted(entry)
        self.repository.delete_many([entry])
        logger.info("Deleted training session %s of profile %s", deleted.id, profile_id)
        return deleted

    def delete_by_date(self, profile_id: int, session_date: datetime.date) -> list[DeletedSession]:
        """Remove every finished session started on *session_date*.  Live sessions are kept."""
        entries = self.repository.get_finished_by_profile(profile_id, session_date)
        if not entries:
            raise NotFoundError("No session history found for this date")
        return self._delete_entries(entries, profile_id, session_date)

    def delete_today(self, profile_id: int, session_date: datetime.date) -> list[DeletedSession]:
        """Like :meth:`delete_by_date`, but only for the current (UTC) day."""
        if session_date != _now().date():
            raise ValidationError("Can only delete history for today. Past history cannot be deleted.")
        entries = self.repository.get_finished_by_profile(profile_id, session_date)
        if not entries:
            raise NotFoundError("No session history found for today")
        return self._delete_entries(entries, profile_id, session_date)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _delete_entries(self, entries: list[TrainingSession], profile_id: int,
                        session_date: datetime.date, ) -> list[DeletedSession]:
        deleted = [self._to_deleted(e) for e in entries]
        self.repository.delete_many(entries)
        logger.info("Deleted %d training sessions of profile %s on %s", len(deleted), profile_id, session_date)
        return deleted

    @staticmethod
    def _to_deleted(entry: TrainingSession) -> DeletedSession:
        return DeletedSession(id=entry.id, routine_name=entry.routine_name, day_name=entry.day_name,
                              session_date=entry.start_time.date(), )

    def _move(self, session_id: int, profile_id: int, target: SessionStatus) -> TrainingSessionResponse:
        entry = self._get_owned_entry(session_id, profile_id)
        entry.status = transition(entry.status, target)

        now = _now()
        entry.last_activity = now
        if target is SessionStatus.CANCELLED:
            entry.end_time = now
        entry = self.repository.update(entry)

        logger.info("Training session %s is now %s", entry.id, entry.status.value)
        return self._to_response(entry)

    def _get_owned_entry(self, session_id: int, profile_id: int) -> TrainingSession:
        entry = self.repository.get_by_id(session_id)
        if not entry or entry.profile_id != profile_id:
            raise NotFoundError("Training session not found")
        return entry

    @staticmethod
    def _find_exercise(exercises: list[TrainingSessionExercise], exercise_id: int) -> TrainingSessionExercise:
        for exercise in exercises:
            if exercise.exercise_id == exercise_id:
                return exercise
        raise NotFoundError("Exercise not found in session")

    @staticmethod
    def _load_exercises(entry: TrainingSession) -> list[TrainingSessionExercise]:
        return [TrainingSessionExercise.model_validate(e) for e in entry.exercises]

    @staticmethod
    def _dump_exercises(exercises: list[TrainingSessionExercise]) -> list[dict]:
        return [e.model_dump(exclude_none=True) for e in exercises]

    def _progress(self, entry: TrainingSession, now: datetime.datetime) -> SessionProgress:
        return compute_progress(self._load_exercises(entry), entry.status, entry.start_time, entry.last_activity, now)

    def _to_response(self, entry: TrainingSession) -> TrainingSessionResponse:
        return TrainingSessionResponse(id=entry.id, profile_id=entry.profile_id,
                                       routine_week_id=entry.routine_week_id, routine_name=entry.routine_name,
                                       day_of_week=entry.day_of_week, day_name=entry.day_name, status=entry.status,
                                       current_exercise_index=entry.current_exercise_index,
                                       start_time=entry.start_time, last_activity=entry.last_activity,
                                       end_time=entry.end_time, exercises=self._load_exercises(entry),
                                       notes=entry.notes, rating=entry.rating, progress=self._progress(entry, _now()), )
