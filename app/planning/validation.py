"""
Configuration readiness check.

A configuration may be submitted only when every set of every exercise
is complete:

- ``reps``, ``weight`` and ``rir`` are non-empty;
- a technique whose toggle is on has all of its entries filled in
  (rest-pause: ``value`` and ``time``; drop set: ``reps`` and ``peso``;
  partials: ``reps``) and, for the list techniques, at least one entry.

A toggle that is off makes the technique's data irrelevant, even when
half-filled.  A toggle that is on with missing data always fails.  The
result is a plain boolean: "not ready" is a normal outcome, not an
error.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping, NamedTuple, Optional, Sequence

from app.core.enums import Technique
from app.planning.toggles import ToggleKey
from app.schemas.set_config import ExerciseConfigItem, SetConfig

MISSING_BASE_FIELDS = "missing_base_fields"
REST_PAUSE_INCOMPLETE = "rest_pause_incomplete"
DROP_SET_INCOMPLETE = "drop_set_incomplete"
PARTIALS_INCOMPLETE = "partials_incomplete"


class IncompleteSetRef(NamedTuple):
    exercise_index: int
    set_index: int
    reason: str


def _is_filled(value: Any) -> bool:
    # "0" is a real value; 0 as a number (rest-pause time) is not.
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return bool(value)


def _set_problem(set_config: SetConfig, exercise_index: int, set_index: int,
                 toggles: Mapping[ToggleKey, bool], ) -> Optional[str]:
    """Return the first reason *set_config* is not ready, or ``None``."""
    if not (_is_filled(set_config.reps) and _is_filled(set_config.weight) and _is_filled(set_config.rir)):
        return MISSING_BASE_FIELDS

    if toggles.get(ToggleKey(exercise_index, set_index, Technique.RP), False):
        if not set_config.rp or not all(_is_filled(d.value) and _is_filled(d.time) for d in set_config.rp):
            return REST_PAUSE_INCOMPLETE

    if toggles.get(ToggleKey(exercise_index, set_index, Technique.DS), False):
        if not set_config.ds or not all(_is_filled(d.reps) and _is_filled(d.peso) for d in set_config.ds):
            return DROP_SET_INCOMPLETE

    if toggles.get(ToggleKey(exercise_index, set_index, Technique.P), False):
        if set_config.partials is None or not _is_filled(set_config.partials.reps):
            return PARTIALS_INCOMPLETE

    return None


def _iter_problems(exercises: Sequence[ExerciseConfigItem],
                   toggles: Mapping[ToggleKey, bool], ) -> Iterator[IncompleteSetRef]:
    for exercise_index, exercise in enumerate(exercises):
        for set_index, set_config in enumerate(exercise.sets_config):
            reason = _set_problem(set_config, exercise_index, set_index, toggles)
            if reason is not None:
                yield IncompleteSetRef(exercise_index, set_index, reason)


def is_configuration_ready(exercises: Sequence[ExerciseConfigItem], toggles: Mapping[ToggleKey, bool], ) -> bool:
    """``True`` when every set of every exercise is complete under *toggles*."""
    return next(_iter_problems(exercises, toggles), None) is None


def find_incomplete_sets(exercises: Sequence[ExerciseConfigItem],
                         toggles: Mapping[ToggleKey, bool], ) -> list[IncompleteSetRef]:
    """List every incomplete set with the first reason it fails."""
    return list(_iter_problems(exercises, toggles))
