"""Database repositories."""

from app.db.repositories.profile import ProfileRepository
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.training_day import TrainingDayRepository
from app.db.repositories.routine import RoutineRepository
from app.db.repositories.routine_week import RoutineWeekRepository
from app.db.repositories.training_session import TrainingSessionRepository

__all__ = [
    "ProfileRepository",
    "ExerciseRepository",
    "TrainingDayRepository",
    "RoutineRepository",
    "RoutineWeekRepository",
    "TrainingSessionRepository",
]
