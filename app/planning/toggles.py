"""
Technique toggle state.

A toggle says whether an optional technique (rest-pause, drop set,
partials) is switched on for one set of one exercise.  Toggles are
addressed by :class:`ToggleKey`, a ``(exercise_index, set_index,
technique)`` tuple, and stored in a sparse dict: a missing key means
*off*.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

from app.core.enums import Technique
from app.schemas.set_config import ExerciseConfigItem, SetConfig


class ToggleKey(NamedTuple):
    exercise_index: int
    set_index: int
    technique: Technique


ToggleMap = dict[ToggleKey, bool]


def technique_enabled(set_config: SetConfig, technique: Technique) -> bool:
    """Whether the saved data of *set_config* implies that *technique* is on.

    Rest-pause and drop sets are lists and count as on only when
    non-empty; partials is a single entry and counts as on when present.
    """
    if technique is Technique.RP:
        return bool(set_config.rp)
    if technique is Technique.DS:
        return bool(set_config.ds)
    return set_config.partials is not None


def derive_toggles(exercises: Sequence[ExerciseConfigItem]) -> ToggleMap:
    """Reconstruct the toggle state of a previously saved configuration."""
    toggles: ToggleMap = {}
    for exercise_index, exercise in enumerate(exercises):
        for set_index, set_config in enumerate(exercise.sets_config):
            for technique in Technique:
                if technique_enabled(set_config, technique):
                    toggles[ToggleKey(exercise_index, set_index, technique)] = True
    return toggles


def flip_toggle(toggles: ToggleMap, key: ToggleKey) -> ToggleMap:
    """Return a copy of *toggles* with the flag at *key* inverted."""
    flipped = dict(toggles)
    flipped[key] = not toggles.get(key, False)
    return flipped


def clear_technique(set_config: SetConfig, technique: Technique) -> SetConfig:
    """Return a copy of *set_config* without any data for *technique*."""
    field = { Technique.RP: "rp", Technique.DS: "ds", Technique.P: "partials" }[technique]
    return set_config.model_copy(update={ field: None })
