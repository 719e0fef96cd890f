"""
End-to-end API tests.

Drive the FastAPI app through ``TestClient`` with ``get_db`` overridden to
use the in-memory test database.
"""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.db.session import get_db
from app.main import app

API = "/api/v1"


@pytest.fixture
def client(engine):
    def _get_test_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def setup(client):
    """A profile with its week, two catalogue exercises and a training day."""
    profile = client.post(f"{API}/profiles", json={ "name": "Ana" }).json()
    bench = client.post(f"{API}/exercises", json={ "name": "Press banca", "image": "bench.png" }).json()
    squat = client.post(f"{API}/exercises", json={ "name": "Sentadilla" }).json()
    day = client.post(f"{API}/training-days", json={
        "profile_id": profile["id"],
        "name": "Pierna y pecho",
        "exercises": [{ "exercise_id": bench["id"] }, { "exercise_id": squat["id"] }],
    }).json()
    weeks = client.post(f"{API}/routine-weeks/initialize", json={ "profile_id": profile["id"] }).json()
    return { "profile": profile, "bench": bench, "squat": squat, "day": day, "weeks": weeks }


# ======================================================================
# Health
# ======================================================================


class TestHealth:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"


# ======================================================================
# Week schedule and configuration
# ======================================================================


class TestConfigurationFlow:
    """Assign a training day, read its template, save and reset."""

    def test_full_flow(self, client, setup):
        profile_id = setup["profile"]["id"]
        monday = setup["weeks"][1]
        assert monday["day_name"] == "Lunes"

        response = client.put(f"{API}/routine-weeks/{monday['id']}",
                              json={ "profile_id": profile_id, "training_day_id": setup["day"]["id"] })
        assert response.status_code == 200
        assert response.json()["routine_name"] == "Pierna y pecho"

        config = client.get(f"{API}/routine-weeks/{monday['id']}/configuration",
                            params={ "profile_id": profile_id }).json()
        assert [e["exercise_name"] for e in config["exercises"]] == ["Press banca", "Sentadilla"]
        assert config["exercises"][0]["sets_config"] == [{
            "reps": "0", "weight": "0", "rir": "0", "rp": [], "ds": [], "partials": None,
        }]

        response = client.put(f"{API}/routine-weeks/{monday['id']}/configuration", json={
            "profile_id": profile_id,
            "routine_name": "Empuje",
            "exercises": [{ "exercise_id": setup["squat"]["id"],
                            "sets_config": [{ "reps": 8, "weight": "100", "rir": "2" }] }],
        })
        assert response.status_code == 200
        assert response.json()[0]["sets_config"][0]["reps"] == "8"

        config = client.get(f"{API}/routine-weeks/{monday['id']}/configuration",
                            params={ "profile_id": profile_id }).json()
        assert config["routine_week"]["routine_name"] == "Empuje"
        assert [e["exercise_id"] for e in config["exercises"]] == [setup["squat"]["id"]]

        response = client.delete(f"{API}/routine-weeks/{monday['id']}/configuration",
                                 params={ "profile_id": profile_id })
        assert response.json() == { "deleted_count": 1 }

    def test_list_weeks(self, client, setup):
        response = client.get(f"{API}/routine-weeks", params={ "profile_id": setup["profile"]["id"] })
        assert [w["day_of_week"] for w in response.json()] == [1, 2, 3, 4, 5, 6, 7]

    def test_initialize_twice_conflicts(self, client, setup):
        response = client.post(f"{API}/routine-weeks/initialize", json={ "profile_id": setup["profile"]["id"] })
        assert response.status_code == 409

    def test_missing_profile_id_is_bad_request(self, client, setup):
        response = client.get(f"{API}/routine-weeks/{setup['weeks'][0]['id']}/configuration")
        assert response.status_code == 400
        assert "profile_id" in response.json()["detail"]

    def test_other_profile_is_not_found(self, client, setup):
        other = client.post(f"{API}/profiles", json={ "name": "Luis" }).json()
        response = client.get(f"{API}/routine-weeks/{setup['weeks'][0]['id']}/configuration",
                              params={ "profile_id": other["id"] })
        assert response.status_code == 404

    def test_delete_unowned_counts_zero(self, client, setup):
        other = client.post(f"{API}/profiles", json={ "name": "Luis" }).json()
        response = client.delete(f"{API}/routine-weeks/{setup['weeks'][0]['id']}/configuration",
                                 params={ "profile_id": other["id"] })
        assert response.status_code == 200
        assert response.json() == { "deleted_count": 0 }

    def test_validate(self, client, setup):
        response = client.post(f"{API}/routine-weeks/{setup['weeks'][0]['id']}/configuration/validate",
                               params={ "profile_id": setup["profile"]["id"] }, json={
            "exercises": [{ "exercise_id": 1, "sets_config": [{ "reps": "8", "weight": "", "rir": "2" }] }],
        })
        assert response.status_code == 200
        body = response.json()
        assert body["ready"] is False
        assert body["incomplete"] == [{ "exercise_index": 0, "set_index": 0, "reason": "missing_base_fields" }]

    def test_validate_unowned_or_missing_slot(self, client, setup):
        other = client.post(f"{API}/profiles", json={ "name": "Luis" }).json()
        body = { "exercises": [] }
        unowned = client.post(f"{API}/routine-weeks/{setup['weeks'][0]['id']}/configuration/validate",
                              params={ "profile_id": other["id"] }, json=body)
        assert unowned.status_code == 404
        missing = client.post(f"{API}/routine-weeks/999999/configuration/validate",
                              params={ "profile_id": setup["profile"]["id"] }, json=body)
        assert missing.status_code == 404
        no_profile = client.post(f"{API}/routine-weeks/{setup['weeks'][0]['id']}/configuration/validate", json=body)
        assert no_profile.status_code == 400

    @pytest.mark.parametrize("exercises_value", ["nope", 5, { "exercise_id": 1 }])
    def test_non_list_exercises_is_bad_request(self, client, setup, exercises_value):
        response = client.put(f"{API}/routine-weeks/{setup['weeks'][0]['id']}/configuration",
                              json={ "profile_id": setup["profile"]["id"], "exercises": exercises_value })
        assert response.status_code == 400
        assert isinstance(response.json()["detail"], str)

    def test_malformed_body_for_unowned_slot_is_not_found(self, client, setup):
        other = client.post(f"{API}/profiles", json={ "name": "Luis" }).json()
        response = client.put(f"{API}/routine-weeks/{setup['weeks'][0]['id']}/configuration",
                              json={ "profile_id": other["id"], "exercises": [{ "sets_config": "nope" }] })
        assert response.status_code == 404

    def test_initialize_configuration(self, client, setup):
        response = client.post(f"{API}/routine-weeks/{setup['weeks'][3]['id']}/configuration/initialize",
                               json={ "profile_id": setup["profile"]["id"], "training_day_id": setup["day"]["id"] })
        assert response.status_code == 201
        assert len(response.json()) == 2


# ======================================================================
# Training sessions
# ======================================================================


class TestSessionFlow:
    """Start a session from a week slot, record sets and finish it."""

    def test_full_flow(self, client, setup):
        profile_id = setup["profile"]["id"]
        params = { "profile_id": profile_id }
        monday = setup["weeks"][1]
        client.post(f"{API}/routine-weeks/{monday['id']}/configuration/initialize",
                    json={ "profile_id": profile_id, "training_day_id": setup["day"]["id"] })

        response = client.post(f"{API}/training-sessions",
                               json={ "profile_id": profile_id, "routine_week_id": monday["id"] })
        assert response.status_code == 201
        session = response.json()
        assert session["status"] == "active"
        assert session["day_name"] == "Lunes"

        conflict = client.post(f"{API}/training-sessions",
                               json={ "profile_id": profile_id, "routine_week_id": monday["id"] })
        assert conflict.status_code == 409

        active = client.get(f"{API}/training-sessions/active", params=params).json()
        assert active["id"] == session["id"]

        response = client.put(f"{API}/training-sessions/{session['id']}/progress", params=params, json={
            "exercise_id": setup["bench"]["id"], "set_number": 1, "reps": 8, "weight": 80, "rir": 2,
        })
        assert response.status_code == 200
        assert response.json()["exercises"][0]["is_completed"] is True

        progress = client.get(f"{API}/training-sessions/{session['id']}/progress", params=params).json()
        assert progress["completed_sets"] == 1
        assert progress["total_sets"] == 2

        assert client.post(f"{API}/training-sessions/{session['id']}/advance",
                           params=params).json()["current_exercise_index"] == 1
        assert client.post(f"{API}/training-sessions/{session['id']}/pause",
                           params=params).json()["status"] == "paused"

        blocked = client.put(f"{API}/training-sessions/{session['id']}/progress", params=params,
                             json={ "exercise_id": setup["squat"]["id"], "set_number": 1 })
        assert blocked.status_code == 409

        assert client.post(f"{API}/training-sessions/{session['id']}/resume",
                           params=params).json()["status"] == "active"

        summary = client.post(f"{API}/training-sessions/{session['id']}/complete", params=params,
                              json={ "rating": 5 }).json()
        assert summary["completed_sets"] == 1
        assert summary["duration_minutes"] >= 0

        assert client.get(f"{API}/training-sessions/active", params=params).json() is None
        completed = client.get(f"{API}/training-sessions", params={ **params, "status": "completed" }).json()
        assert [s["id"] for s in completed] == [session["id"]]

    def test_unknown_profile(self, client):
        response = client.get(f"{API}/training-sessions/active", params={ "profile_id": 9999 })
        assert response.status_code == 404

    def test_set_beyond_plan_is_bad_request(self, client, setup):
        params = { "profile_id": setup["profile"]["id"] }
        session = client.post(f"{API}/training-sessions", json={
            "profile_id": setup["profile"]["id"], "day_of_week": 2,
            "exercises": [{ "exercise_id": setup["bench"]["id"], "exercise_name": "Press banca",
                            "sets_config": [{ "reps": "8", "weight": "80", "rir": "2" }] }],
        }).json()

        response = client.put(f"{API}/training-sessions/{session['id']}/progress", params=params,
                              json={ "exercise_id": setup["bench"]["id"], "set_number": 2, "reps": 8 })
        assert response.status_code == 400
        progress = client.get(f"{API}/training-sessions/{session['id']}/progress", params=params).json()
        assert (progress["completed_sets"], progress["total_sets"]) == (0, 1)


# ======================================================================
# Session history
# ======================================================================


class TestHistoryFlow:
    """List and delete finished sessions."""

    def _finish_one(self, client, setup, action: str = "complete"):
        params = { "profile_id": setup["profile"]["id"] }
        session = client.post(f"{API}/training-sessions", json={
            "profile_id": setup["profile"]["id"], "routine_name": "Pierna", "day_of_week": 2,
            "exercises": [{ "exercise_id": setup["squat"]["id"], "exercise_name": "Sentadilla" }],
        }).json()
        if action == "complete":
            client.post(f"{API}/training-sessions/{session['id']}/complete", params=params, json={ })
        else:
            client.post(f"{API}/training-sessions/{session['id']}/{action}", params=params)
        return session

    def test_list_and_delete_today(self, client, setup):
        params = { "profile_id": setup["profile"]["id"] }
        today = datetime.datetime.utcnow().date().isoformat()
        done = self._finish_one(client, setup)
        cancelled = self._finish_one(client, setup, "cancel")

        history = client.get(f"{API}/training-sessions/history", params={ **params, "session_date": today }).json()
        assert sorted(s["id"] for s in history) == sorted([done["id"], cancelled["id"]])

        response = client.delete(f"{API}/training-sessions/history/today",
                                 params={ **params, "session_date": today })
        assert response.status_code == 200
        assert { d["session_date"] for d in response.json() } == { today }
        assert client.get(f"{API}/training-sessions/history", params=params).json() == []

    def test_delete_today_rejects_past_date(self, client, setup):
        self._finish_one(client, setup)
        yesterday = (datetime.datetime.utcnow().date() - datetime.timedelta(days=1)).isoformat()
        response = client.delete(f"{API}/training-sessions/history/today",
                                 params={ "profile_id": setup["profile"]["id"], "session_date": yesterday })
        assert response.status_code == 400

    def test_delete_by_date_nothing_found(self, client, setup):
        response = client.delete(f"{API}/training-sessions/history",
                                 params={ "profile_id": setup["profile"]["id"], "session_date": "2020-01-01" })
        assert response.status_code == 404

    def test_delete_by_id(self, client, setup):
        params = { "profile_id": setup["profile"]["id"] }
        session = self._finish_one(client, setup)

        response = client.delete(f"{API}/training-sessions/{session['id']}", params=params)
        assert response.status_code == 200
        assert response.json()["routine_name"] == "Pierna"
        assert client.get(f"{API}/training-sessions/{session['id']}", params=params).status_code == 404

    def test_delete_live_conflicts(self, client, setup):
        params = { "profile_id": setup["profile"]["id"] }
        session = client.post(f"{API}/training-sessions", json={
            "profile_id": setup["profile"]["id"], "day_of_week": 2,
            "exercises": [{ "exercise_id": setup["squat"]["id"], "exercise_name": "Sentadilla" }],
        }).json()
        assert client.delete(f"{API}/training-sessions/{session['id']}", params=params).status_code == 409

    def test_other_profile_cannot_delete(self, client, setup):
        other = client.post(f"{API}/profiles", json={ "name": "Luis" }).json()
        session = self._finish_one(client, setup)
        response = client.delete(f"{API}/training-sessions/{session['id']}", params={ "profile_id": other["id"] })
        assert response.status_code == 404

    def test_limit_out_of_range(self, client, setup):
        response = client.get(f"{API}/training-sessions/history",
                              params={ "profile_id": setup["profile"]["id"], "limit": 0 })
        assert response.status_code == 422


# ======================================================================
# Routines and catalogue maintenance
# ======================================================================


class TestRoutineFlow:
    """Create, list, update and delete routines."""

    def test_crud(self, client, setup):
        profile_id = setup["profile"]["id"]
        params = { "profile_id": profile_id }

        response = client.post(f"{API}/routines", json={
            "profile_id": profile_id, "name": "Torso",
            "exercises": [{ "exercise_id": setup["bench"]["id"], "sets": 4 }],
        })
        assert response.status_code == 201
        routine = response.json()
        assert routine["exercise_count"] == 1

        listed = client.get(f"{API}/routines", params=params).json()
        assert routine["id"] in [r["id"] for r in listed]

        response = client.put(f"{API}/routines/{routine['id']}", json={
            "profile_id": profile_id, "is_favorite": True,
            "exercises": [{ "exercise_id": setup["squat"]["id"] }, { "exercise_id": setup["bench"]["id"] }],
        })
        assert response.status_code == 200
        assert response.json()["is_favorite"] is True
        assert [e["exercise"]["name"] for e in response.json()["exercises"]] == ["Sentadilla", "Press banca"]

        assert client.delete(f"{API}/routines/{routine['id']}", params=params).status_code == 204
        assert client.get(f"{API}/routines/{routine['id']}", params=params).status_code == 404

    def test_create_without_exercises_is_bad_request(self, client, setup):
        response = client.post(f"{API}/routines", json={ "profile_id": setup["profile"]["id"], "name": "Vacía" })
        assert response.status_code == 400
        assert response.json()["detail"] == "At least one exercise is required"

    def test_other_profile_is_not_found(self, client, setup):
        other = client.post(f"{API}/profiles", json={ "name": "Luis" }).json()
        routine = client.post(f"{API}/routines", json={
            "profile_id": setup["profile"]["id"], "name": "Torso",
            "exercises": [{ "exercise_id": setup["bench"]["id"] }],
        }).json()
        assert client.get(f"{API}/routines/{routine['id']}",
                          params={ "profile_id": other["id"] }).status_code == 404
        assert client.delete(f"{API}/routines/{routine['id']}",
                             params={ "profile_id": other["id"] }).status_code == 404


class TestCatalogueMaintenance:
    def test_training_day_update_and_delete(self, client, setup):
        params = { "profile_id": setup["profile"]["id"] }
        day_id = setup["day"]["id"]

        response = client.put(f"{API}/training-days/{day_id}",
                              json={ "profile_id": setup["profile"]["id"], "name": "Pierna" })
        assert response.status_code == 200
        assert response.json()["name"] == "Pierna"

        assert client.delete(f"{API}/training-days/{day_id}", params=params).status_code == 204
        assert client.get(f"{API}/training-days/{day_id}", params=params).status_code == 404

    def test_exercise_get_update_delete(self, client, setup):
        created = client.post(f"{API}/exercises", json={ "name": "Curl" }).json()

        assert client.get(f"{API}/exercises/{created['id']}").json()["name"] == "Curl"
        response = client.put(f"{API}/exercises/{created['id']}", json={ "image": "curl.png" })
        assert response.json()["image"] == "curl.png"

        assert client.delete(f"{API}/exercises/{created['id']}").status_code == 204
        assert client.get(f"{API}/exercises/{created['id']}").status_code == 404

    def test_exercise_in_use_conflicts(self, client, setup):
        assert client.delete(f"{API}/exercises/{setup['bench']['id']}").status_code == 409
