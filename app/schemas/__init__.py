"""Pydantic schemas for request/response validation."""

from app.schemas.set_config import (
    RPDetail,
    DSDetail,
    PartialDetail,
    SetConfig,
    ExerciseConfigItem,
)
from app.schemas.profile import ProfileCreate, ProfileResponse
from app.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseUpdate
from app.schemas.training_day import (
    ExerciseSummary,
    TrainingDayCreate,
    TrainingDayExerciseCreate,
    TrainingDayExerciseDetail,
    TrainingDayResponse,
    TrainingDayUpdate,
)
from app.schemas.routine import (
    RoutineCreate,
    RoutineExerciseCreate,
    RoutineExerciseDetail,
    RoutineResponse,
    RoutineUpdate,
)
from app.schemas.routine_week import (
    RoutineWeekResponse,
    RoutineWeekInitialize,
    RoutineWeekUpdate,
    RoutineWeekHeader,
    ConfigurationResponse,
    ConfigurationExerciseInput,
    ConfigurationUpdate,
    ConfigurationInitialize,
    ConfigurationDeleteResponse,
    ConfigurationValidateRequest,
    ConfigurationValidateResponse,
    IncompleteSet,
    ToggleState,
)
from app.schemas.training_session import (
    PerformedSet,
    TrainingSessionExercise,
    TrainingSessionExerciseCreate,
    TrainingSessionCreate,
    SetProgressUpdate,
    SessionComplete,
    SessionProgress,
    SessionSummary,
    TrainingSessionResponse,
    DeletedSession,
)

__all__ = [
    "RPDetail",
    "DSDetail",
    "PartialDetail",
    "SetConfig",
    "ExerciseConfigItem",
    "ProfileCreate",
    "ProfileResponse",
    "ExerciseCreate",
    "ExerciseResponse",
    "ExerciseUpdate",
    "ExerciseSummary",
    "TrainingDayCreate",
    "TrainingDayExerciseCreate",
    "TrainingDayExerciseDetail",
    "TrainingDayResponse",
    "TrainingDayUpdate",
    "RoutineCreate",
    "RoutineExerciseCreate",
    "RoutineExerciseDetail",
    "RoutineResponse",
    "RoutineUpdate",
    "RoutineWeekResponse",
    "RoutineWeekInitialize",
    "RoutineWeekUpdate",
    "RoutineWeekHeader",
    "ConfigurationResponse",
    "ConfigurationExerciseInput",
    "ConfigurationUpdate",
    "ConfigurationInitialize",
    "ConfigurationDeleteResponse",
    "ConfigurationValidateRequest",
    "ConfigurationValidateResponse",
    "IncompleteSet",
    "ToggleState",
    "PerformedSet",
    "TrainingSessionExercise",
    "TrainingSessionExerciseCreate",
    "TrainingSessionCreate",
    "SetProgressUpdate",
    "SessionComplete",
    "SessionProgress",
    "SessionSummary",
    "TrainingSessionResponse",
    "DeletedSession",
]
