"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.profile import Profile  # noqa: F401
from app.models.exercise import Exercise  # noqa: F401
from app.models.training_day import TrainingDay, TrainingDayExercise  # noqa: F401
from app.models.routine import Routine, RoutineExercise  # noqa: F401
from app.models.routine_week import RoutineWeek  # noqa: F401
from app.models.training_session import TrainingSession  # noqa: F401
