"""
Unit tests for the configuration readiness check.

A set is ready when its base fields are filled and every technique that
is toggled on is complete.  Techniques toggled off never block.
"""

import pytest

from app.core.enums import Technique
from app.planning.toggles import ToggleKey, derive_toggles
from app.planning.validation import (
    DROP_SET_INCOMPLETE,
    MISSING_BASE_FIELDS,
    PARTIALS_INCOMPLETE,
    REST_PAUSE_INCOMPLETE,
    find_incomplete_sets,
    is_configuration_ready,
)
from app.schemas.set_config import DSDetail, ExerciseConfigItem, PartialDetail, RPDetail, SetConfig


# ======================================================================
# Helpers
# ======================================================================


def _set(**overrides) -> SetConfig:
    defaults = { "reps": "8", "weight": "80", "rir": "2" }
    defaults.update(overrides)
    return SetConfig(**defaults)


def _config(*sets: SetConfig) -> list[ExerciseConfigItem]:
    return [ExerciseConfigItem(exercise_id=1, exercise_name="Press banca", sets_config=list(sets))]


RP_ON = { ToggleKey(0, 0, Technique.RP): True }
DS_ON = { ToggleKey(0, 0, Technique.DS): True }
P_ON = { ToggleKey(0, 0, Technique.P): True }


# ======================================================================
# Base fields
# ======================================================================


class TestBaseFields:
    """reps, weight and rir must be non-empty."""

    def test_complete_set(self):
        assert is_configuration_ready(_config(_set()), {})

    @pytest.mark.parametrize("field", ["reps", "weight", "rir"])
    def test_empty_field_rejected(self, field):
        assert not is_configuration_ready(_config(_set(**{ field: "" })), {})

    def test_zero_text_is_filled(self):
        assert is_configuration_ready(_config(_set(reps="0", weight="0", rir="0")), {})

    def test_numbers_are_accepted_as_text(self):
        assert is_configuration_ready(_config(SetConfig(reps=8, weight=72.5, rir=1)), {})

    def test_empty_configuration_is_ready(self):
        assert is_configuration_ready([], {})

    def test_exercise_without_sets_is_ready(self):
        assert is_configuration_ready(_config(), {})


# ======================================================================
# Rest-pause
# ======================================================================


class TestRestPause:
    """Test rest-pause completeness under its toggle."""

    def test_on_and_empty_list(self):
        assert not is_configuration_ready(_config(_set(rp=[])), RP_ON)

    def test_on_and_missing_list(self):
        assert not is_configuration_ready(_config(_set()), RP_ON)

    def test_on_and_complete(self):
        assert is_configuration_ready(_config(_set(rp=[RPDetail(value="3", time=15)])), RP_ON)

    def test_on_and_missing_time(self):
        assert not is_configuration_ready(_config(_set(rp=[RPDetail(value="3")])), RP_ON)

    def test_on_and_zero_time(self):
        assert not is_configuration_ready(_config(_set(rp=[RPDetail(value="3", time=0)])), RP_ON)

    def test_on_and_one_entry_incomplete(self):
        rp = [RPDetail(value="3", time=15), RPDetail(value="", time=15)]
        assert not is_configuration_ready(_config(_set(rp=rp)), RP_ON)

    def test_off_ignores_partial_data(self):
        assert is_configuration_ready(_config(_set(rp=[RPDetail(value="", time=None)])), {})

    def test_explicitly_off_ignores_partial_data(self):
        toggles = { ToggleKey(0, 0, Technique.RP): False }
        assert is_configuration_ready(_config(_set(rp=[RPDetail(value="3")])), toggles)


# ======================================================================
# Drop sets and partials
# ======================================================================


class TestDropSet:
    def test_on_and_empty(self):
        assert not is_configuration_ready(_config(_set(ds=[])), DS_ON)

    def test_on_and_missing_peso(self):
        assert not is_configuration_ready(_config(_set(ds=[DSDetail(reps="6")])), DS_ON)

    def test_on_and_complete(self):
        assert is_configuration_ready(_config(_set(ds=[DSDetail(reps="6", peso="60")])), DS_ON)


class TestPartials:
    def test_on_and_missing(self):
        assert not is_configuration_ready(_config(_set()), P_ON)

    def test_on_and_empty_reps(self):
        assert not is_configuration_ready(_config(_set(partials=PartialDetail())), P_ON)

    def test_on_and_complete(self):
        assert is_configuration_ready(_config(_set(partials=PartialDetail(reps="4"))), P_ON)


# ======================================================================
# find_incomplete_sets
# ======================================================================


class TestFindIncompleteSets:
    """Every failing set is reported with its first failing reason."""

    def test_reports_positions_and_reasons(self):
        exercises = [
            ExerciseConfigItem(exercise_id=1, sets_config=[_set(), _set(rir="")]),
            ExerciseConfigItem(exercise_id=2, sets_config=[_set(rp=[]), _set(ds=[]), _set(partials=None)]),
        ]
        toggles = {
            ToggleKey(1, 0, Technique.RP): True,
            ToggleKey(1, 1, Technique.DS): True,
            ToggleKey(1, 2, Technique.P): True,
        }
        problems = find_incomplete_sets(exercises, toggles)
        assert [(p.exercise_index, p.set_index, p.reason) for p in problems] == [
            (0, 1, MISSING_BASE_FIELDS),
            (1, 0, REST_PAUSE_INCOMPLETE),
            (1, 1, DROP_SET_INCOMPLETE),
            (1, 2, PARTIALS_INCOMPLETE),
        ]

    def test_base_fields_reported_first(self):
        toggles = { ToggleKey(0, 0, Technique.RP): True }
        (problem,) = find_incomplete_sets(_config(_set(reps="", rp=[])), toggles)
        assert problem.reason == MISSING_BASE_FIELDS

    def test_derived_toggles_of_saved_configuration(self):
        # Saved rest-pause data with a missing time keeps its toggle on
        exercises = _config(_set(rp=[RPDetail(value="3")]))
        assert not is_configuration_ready(exercises, derive_toggles(exercises))
