"""Business logic services."""

from app.services.profile_service import ProfileService
from app.services.exercise_service import ExerciseService
from app.services.training_day_service import TrainingDayService
from app.services.routine_service import RoutineService
from app.services.routine_week_service import RoutineWeekService
from app.services.routine_configuration_service import RoutineConfigurationService
from app.services.training_session_service import TrainingSessionService

__all__ = [
    "ProfileService",
    "ExerciseService",
    "TrainingDayService",
    "RoutineService",
    "RoutineWeekService",
    "RoutineConfigurationService",
    "TrainingSessionService",
]
