"""
Default configuration synthesized from a training day.

Used whenever a week slot has a training day assigned but no saved
configuration yet: every exercise of the training day gets a single
placeholder set.
"""

from __future__ import annotations

from typing import Sequence

from app.schemas.set_config import ExerciseConfigItem, SetConfig
from app.schemas.training_day import TrainingDayExerciseDetail

PLACEHOLDER_VALUE = "0"


def default_set_config() -> SetConfig:
    """A single placeholder set: base fields ``"0"``, rest-pause and drop-set empty, no partials."""
    return SetConfig(reps=PLACEHOLDER_VALUE, weight=PLACEHOLDER_VALUE, rir=PLACEHOLDER_VALUE, rp=[], ds=[],
                     partials=None, )


def build_template(training_day_exercises: Sequence[TrainingDayExerciseDetail], ) -> list[ExerciseConfigItem]:
    """Return one configuration item per training-day exercise, in input order.

    The input is not modified.
    """
    return [ExerciseConfigItem(exercise_id=assignment.exercise.id, exercise_name=assignment.exercise.name,
                               exercise_image=assignment.exercise.image or "", order_index=position,
                               sets_config=[default_set_config()], notes="", )
            for position, assignment in enumerate(training_day_exercises)]
