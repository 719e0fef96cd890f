"""
Tests for the weekly schedule service.
"""

import pytest

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.models.routine import Routine
from app.schemas.routine_week import RoutineWeekUpdate
from app.services.routine_configuration_service import RoutineConfigurationService
from app.services.routine_week_service import RoutineWeekService


@pytest.fixture
def service(db) -> RoutineWeekService:
    return RoutineWeekService(db)


@pytest.fixture
def weeks(service, profile):
    return service.initialize_for_profile(profile.id)


# ======================================================================
# initialize_for_profile
# ======================================================================


class TestInitialize:
    """Test creation of the seven day slots."""

    def test_seven_slots_sunday_first(self, weeks):
        assert [w.day_of_week for w in weeks] == [1, 2, 3, 4, 5, 6, 7]
        assert [w.day_name for w in weeks] == ["Domingo", "Lunes", "Martes", "Miércoles", "Jueves", "Viernes",
                                               "Sábado"]

    def test_slots_start_empty(self, weeks):
        for week in weeks:
            assert not week.is_rest_day
            assert week.routine_id is None
            assert week.training_day_id is None
            assert not week.has_configuration

    def test_twice_conflicts(self, service, profile, weeks):
        with pytest.raises(ConflictError):
            service.initialize_for_profile(profile.id)

    def test_unknown_profile(self, service):
        with pytest.raises(NotFoundError):
            service.initialize_for_profile(9999)

    def test_profiles_are_separate(self, service, weeks, other_profile):
        assert len(service.initialize_for_profile(other_profile.id)) == 7
        assert len(service.get_all_for_profile(other_profile.id)) == 7


# ======================================================================
# update
# ======================================================================


class TestUpdate:
    """Test assigning routines, training days and rest days."""

    def test_assign_training_day_creates_routine(self, service, db, profile, weeks, training_day):
        updated = service.update(weeks[1].id, RoutineWeekUpdate(profile_id=profile.id,
                                                                training_day_id=training_day.id))
        assert updated.training_day_id == training_day.id
        assert updated.routine_name == "Pierna y pecho"

        routine = db.get(Routine, updated.routine_id)
        assert routine.name == "Rutina - Pierna y pecho"
        assert routine.description == "Rutina creada automáticamente desde Pierna y pecho"
        assert routine.profile_id == profile.id

    def test_assign_existing_routine(self, service, db, profile, weeks):
        routine = Routine(profile_id=profile.id, name="Torso")
        db.add(routine)
        db.commit()
        db.refresh(routine)

        updated = service.update(weeks[2].id, RoutineWeekUpdate(profile_id=profile.id, routine_id=routine.id))
        assert updated.routine_id == routine.id
        assert updated.routine_name == "Torso"
        assert updated.training_day_id is None

    def test_rest_day_clears_assignment(self, service, db, profile, weeks, training_day, exercises):
        service.update(weeks[1].id, RoutineWeekUpdate(profile_id=profile.id, training_day_id=training_day.id))
        RoutineConfigurationService(db).initialize_configuration(weeks[1].id, profile.id, training_day.id)

        updated = service.update(weeks[1].id, RoutineWeekUpdate(profile_id=profile.id, is_rest_day=True))
        assert updated.is_rest_day
        assert updated.routine_id is None
        assert updated.routine_name is None
        assert updated.training_day_id is None
        assert not updated.has_configuration

    def test_no_fields(self, service, profile, weeks):
        with pytest.raises(ValidationError):
            service.update(weeks[0].id, RoutineWeekUpdate(profile_id=profile.id))

    def test_other_profile_not_found(self, service, other_profile, weeks):
        with pytest.raises(NotFoundError):
            service.update(weeks[0].id, RoutineWeekUpdate(profile_id=other_profile.id, is_rest_day=True))

    def test_unowned_training_day(self, service, other_profile, training_day, weeks):
        other_weeks = service.initialize_for_profile(other_profile.id)
        with pytest.raises(NotFoundError):
            service.update(other_weeks[0].id, RoutineWeekUpdate(profile_id=other_profile.id,
                                                                training_day_id=training_day.id))

    def test_unknown_routine(self, service, profile, weeks):
        with pytest.raises(NotFoundError):
            service.update(weeks[0].id, RoutineWeekUpdate(profile_id=profile.id, routine_id=9999))
