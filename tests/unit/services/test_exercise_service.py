"""
Tests for the exercise catalogue service.
"""

import pytest

from app.core.exceptions import ConflictError, NotFoundError
from app.schemas.exercise import ExerciseUpdate
from app.services.exercise_service import ExerciseService


@pytest.fixture
def service(db) -> ExerciseService:
    return ExerciseService(db)


class TestExerciseService:
    def test_get(self, service, exercises):
        assert service.get(exercises[0].id).name == "Press banca"

    def test_get_missing(self, service):
        with pytest.raises(NotFoundError):
            service.get(9999)

    def test_partial_update(self, service, exercises):
        updated = service.update(exercises[1].id, ExerciseUpdate(image="squat.png"))
        assert (updated.name, updated.image, updated.muscle_group) == ("Sentadilla", "squat.png", "legs")

    def test_update_missing(self, service):
        with pytest.raises(NotFoundError):
            service.update(9999, ExerciseUpdate(name="Curl"))

    def test_delete_unused(self, service, exercises):
        service.delete(exercises[2].id)
        with pytest.raises(NotFoundError):
            service.get(exercises[2].id)
        assert [e.name for e in service.get_all()] == ["Press banca", "Sentadilla"]

    def test_delete_used_by_training_day(self, service, exercises, training_day):
        with pytest.raises(ConflictError):
            service.delete(exercises[0].id)
        assert service.get(exercises[0].id).name == "Press banca"

    def test_delete_missing(self, service):
        with pytest.raises(NotFoundError):
            service.delete(9999)
