"""SQLModel database models."""

from app.models.profile import Profile
from app.models.exercise import Exercise
from app.models.training_day import TrainingDay, TrainingDayExercise
from app.models.routine import Routine, RoutineExercise
from app.models.routine_week import RoutineWeek
from app.models.training_session import TrainingSession

__all__ = [
    "Profile",
    "Exercise",
    "TrainingDay",
    "TrainingDayExercise",
    "Routine",
    "RoutineExercise",
    "RoutineWeek",
    "TrainingSession",
]
