"""
Tests for the workouts and stats routers.

Uses the app/client fixtures from tests/conftest.py: the repository is an
in-memory fake and the clock is pinned to Wednesday 2024-03-13 12:00.
"""
from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from api.deps import get_workout_repo
from application.exceptions import DeleteStage
from backend.main import create_app
from infrastructure import SupabaseWorkoutRepository
from domain.models import DayType
from tests.fakes import make_workout

pytestmark = pytest.mark.unit


DRAFT = {
    "date": "2024-03-13",
    "day_type": "legs",
    "exercises": [
        {"name": "Squat", "sets": [{"reps": 5, "weight_kg": 100}, {"reps": 0, "weight_kg": 0}]},
        {"name": "", "sets": [{"reps": 10, "weight_kg": 60}]},
        {"name": "Leg Press", "sets": [{"reps": 12, "weight_kg": 150}]},
    ],
}


# =============================================================================
# GET /workouts
# =============================================================================


class TestListWorkouts:

    def test_empty_history(self, client):
        response = client.get("/workouts")

        assert response.status_code == 200
        assert response.json() == {"workouts": [], "count": 0}

    def test_newest_first_with_nested_sets(self, client, workout_repo):
        workout_repo.seed([
            make_workout(date(2024, 3, 4), 500, workout_id="old", exercises=[("Row", [(10, 50)])]),
            make_workout(date(2024, 3, 12), 800, workout_id="new"),
        ])

        body = client.get("/workouts").json()

        assert body["count"] == 2
        assert [w["id"] for w in body["workouts"]] == ["new", "old"]
        old = body["workouts"][1]
        assert old["date"] == "2024-03-04"
        assert old["exercises"][0]["sets"][0]["volume_kg"] == 500

    def test_store_failure_is_502(self, client, workout_repo):
        workout_repo.fail_reads = True

        assert client.get("/workouts").status_code == 502


class TestGetWorkout:

    def test_found(self, client, workout_repo):
        workout_repo.seed([make_workout(date(2024, 3, 4), 500, DayType.PUSH, workout_id="w-1")])

        response = client.get("/workouts/w-1")

        assert response.status_code == 200
        assert response.json()["day_type"] == "push"
        assert response.json()["total_kg"] == 500

    def test_missing_is_404(self, client):
        assert client.get("/workouts/nope").status_code == 404


# =============================================================================
# POST /workouts, POST /workouts/preview
# =============================================================================


class TestLogWorkout:

    def test_preview_counts_only_what_would_be_stored(self, client, workout_repo):
        response = client.post("/workouts/preview", json=DRAFT)

        assert response.status_code == 200
        assert response.json() == {"total_kg": 2300.0, "exercise_count": 2, "set_count": 2}
        assert workout_repo.get_all() == []

    def test_created(self, client, workout_repo):
        response = client.post("/workouts", json=DRAFT)

        assert response.status_code == 201
        body = response.json()
        assert body["total_kg"] == 2300.0
        assert [e["name"] for e in body["exercises"]] == ["Squat", "Leg Press"]
        assert len(workout_repo.get_all()) == 1

    def test_nothing_to_store_is_422(self, client, workout_repo):
        draft = {"date": "2024-03-13", "day_type": "pull", "exercises": [{"name": "Row", "sets": [{}]}]}

        response = client.post("/workouts", json=draft)

        assert response.status_code == 422
        assert response.json()["detail"]["validation_errors"]
        assert workout_repo.get_all() == []

    def test_malformed_body_is_422(self, client):
        response = client.post("/workouts", json={**DRAFT, "day_type": "cardio"})

        assert response.status_code == 422

    def test_partial_write_is_502_with_written_ids(self, client, workout_repo):
        workout_repo.fail_on_exercise = 1

        response = client.post("/workouts", json=DRAFT)

        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["workout_id"] == workout_repo.get_all()[0].id
        assert len(detail["created_exercise_ids"]) == 1


# =============================================================================
# DELETE /workouts/{id}
# =============================================================================


class TestDeleteWorkout:

    @pytest.fixture(autouse=True)
    def seeded(self, workout_repo):
        workout_repo.seed([make_workout(date(2024, 3, 4), 500, workout_id="w-1", exercises=[("Row", [(10, 50)])])])

    def test_deleted(self, client, workout_repo):
        response = client.delete("/workouts/w-1")

        assert response.status_code == 204
        assert workout_repo.get_all() == []

    def test_missing_is_404(self, client):
        assert client.delete("/workouts/nope").status_code == 404

    def test_partial_delete_is_502_with_stages(self, client, workout_repo):
        workout_repo.fail_delete_at = DeleteStage.EXERCISES

        response = client.delete("/workouts/w-1")

        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["workout_id"] == "w-1"
        assert detail["failed_stage"] == "exercises"
        assert detail["completed_stages"] == ["sets"]


# =============================================================================
# GET /stats
# =============================================================================


class TestStats:

    def test_no_data(self, client):
        response = client.get("/stats")

        assert response.status_code == 200
        assert response.json() == {"has_data": False, "stats": None}

    def test_stats_against_pinned_clock(self, client, workout_repo):
        workout_repo.seed([
            make_workout(date(2024, 3, 12), 100, DayType.PULL),
            make_workout(date(2024, 3, 11), 200, DayType.PUSH),
            make_workout(date(2024, 3, 3), 50, DayType.PULL),
        ])

        body = client.get("/stats").json()

        assert body["has_data"] is True
        stats = body["stats"]
        assert stats["total_workouts"] == 3
        assert stats["total_kg"] == 350
        assert stats["this_week_workouts"] == 2
        assert stats["this_week_kg"] == 300
        assert stats["last_7_days_kg"] == 300
        assert stats["previous_7_days_kg"] == 50
        assert stats["trend_percent"] == 500
        assert stats["day_type_breakdown"] == {"pull": 2, "push": 1}

    def test_non_finite_totals_serialise_as_null(self, client, workout_repo):
        workout_repo.seed([make_workout(date(2024, 3, 12), float("nan"))])

        response = client.get("/stats")

        assert response.status_code == 200
        stats = response.json()["stats"]
        assert stats["total_workouts"] == 1
        assert stats["total_kg"] is None
        assert stats["avg_kg_per_workout"] is None
        assert stats["last_7_days_kg"] is None
        assert stats["trend_percent"] == 0

    def test_store_failure_is_502(self, client, workout_repo):
        workout_repo.fail_reads = True

        assert client.get("/stats").status_code == 502


# =============================================================================
# Ids the store cannot parse
# =============================================================================


class TestMalformedWorkoutId:
    """Postgres rejects a non-UUID id in a filter; the API reports it as missing."""

    @pytest.fixture
    def supabase_client(self, app):
        client = MagicMock()
        client.table.return_value.select.return_value.eq.return_value.limit.return_value \
            .execute.side_effect = APIError({"code": "22P02", "message": "invalid input syntax for type uuid"})
        client.table.return_value.select.return_value.eq.return_value \
            .execute.side_effect = APIError({"code": "22P02", "message": "invalid input syntax for type uuid"})
        app.dependency_overrides[get_workout_repo] = lambda: SupabaseWorkoutRepository(client)
        return client

    def test_get_is_404(self, client, supabase_client):
        assert client.get("/workouts/nope").status_code == 404

    def test_delete_is_404_not_partial_failure(self, client, supabase_client):
        response = client.delete("/workouts/nope")

        assert response.status_code == 404
        assert "failed_stage" not in response.text
        supabase_client.table.return_value.delete.assert_not_called()


# =============================================================================
# Unconfigured database
# =============================================================================


class TestWithoutDatabase:

    @pytest.fixture
    def bare_client(self, test_settings):
        with patch("api.deps.get_supabase_client", return_value=None):
            yield TestClient(create_app(settings=test_settings))

    @pytest.mark.parametrize("method,path", [
        ("get", "/workouts"),
        ("get", "/stats"),
        ("delete", "/workouts/w-1"),
    ])
    def test_workout_endpoints_are_503(self, bare_client, method, path):
        response = getattr(bare_client, method)(path)

        assert response.status_code == 503

    def test_preview_needs_no_database(self, bare_client):
        assert bare_client.post("/workouts/preview", json=DRAFT).status_code == 200
