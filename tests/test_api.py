"""Tests for the HTTP API."""

import json

from fastapi.testclient import TestClient

from helpers import make_workouts_json
from workout_ai.agents.client import CompletionError
from workout_ai.config import Settings
from workout_ai.db.repositories import UserRepository
from workout_ai.web import create_app

GENERATION_PARAMS = {
    "age": 30,
    "gender": "female",
    "history": "3 years running",
    "goal": "get stronger",
    "location": "gym",
    "weight": 65,
    "height": 170,
}


def register(client, username="alice", password="secret1"):
    return client.post("/register", json={"username": username, "password": password}).json()


def generate(client, user_id: int, amount: int):
    return client.get("/workouts", params={**GENERATION_PARAMS, "userId": user_id, "amount": amount})


class TestRegister:
    """Tests for POST /register."""

    def test_success(self, api_client):
        """Test registering a new user."""
        body = register(api_client)
        assert body == {
            "success": True,
            "message": "User registered successfully",
            "username": "alice",
            "userId": 1,
        }

    def test_short_username(self, api_client):
        """Test that short usernames are rejected."""
        body = register(api_client, username="al")
        assert body == {"success": False, "message": "Username must be at least 3 characters"}

    def test_short_password(self, api_client):
        """Test that short passwords are rejected."""
        body = register(api_client, password="12345")
        assert body == {"success": False, "message": "Password must be at least 6 characters"}

    def test_missing_fields(self, api_client):
        """Test an empty body is a failure message, not a 422."""
        response = api_client.post("/register", json={})
        assert response.status_code == 200
        assert response.json()["message"] == "Username and password are required"

    def test_duplicate_username(self, api_client):
        """Test registering a taken username."""
        register(api_client)
        body = register(api_client, password="different1")
        assert body == {"success": False, "message": "Username already exists"}

    def test_concurrent_duplicate_username(self, api_client, monkeypatch):
        """Test a registration that passes the lookup but hits the UNIQUE constraint."""

        async def not_found(self, username):
            return None

        monkeypatch.setattr(UserRepository, "get_by_username", not_found)
        register(api_client)
        body = register(api_client, password="different1")
        assert body == {"success": False, "message": "Username already exists"}


class TestLogin:
    """Tests for POST /login."""

    def test_success(self, api_client):
        """Test logging in with correct credentials."""
        user_id = register(api_client)["userId"]
        body = api_client.post("/login", json={"username": "alice", "password": "secret1"}).json()
        assert body["success"] is True
        assert body["userId"] == user_id
        assert body["username"] == "alice"

    def test_failures_are_indistinguishable(self, api_client):
        """Test wrong password and unknown user give the same message."""
        register(api_client)
        wrong_password = api_client.post(
            "/login", json={"username": "alice", "password": "wrong12"}
        ).json()
        unknown_user = api_client.post(
            "/login", json={"username": "nobody", "password": "secret1"}
        ).json()
        assert wrong_password == unknown_user == {
            "success": False,
            "message": "Invalid username or password",
        }

    def test_empty_fields(self, api_client):
        """Test logging in with blank credentials."""
        body = api_client.post("/login", json={"username": "", "password": ""}).json()
        assert body == {"success": False, "message": "Username and password are required"}


class TestWorkouts:
    """Tests for workout generation and retrieval."""

    def test_no_plan_returns_empty_list(self, api_client):
        """Test retrieval before any plan was generated."""
        user_id = register(api_client)["userId"]
        response = api_client.get("/get-user-workout", params={"userId": user_id})
        assert response.status_code == 200
        assert response.json() == []

    def test_generate_then_regenerate(self, api_client, stub_client):
        """Test generating a plan and replacing it with a new one."""
        user_id = register(api_client)["userId"]
        assert user_id == 1

        first = make_workouts_json(
            ("Push", ["Bench Press", "Dips"]),
            ("Pull", ["Row"]),
            ("Legs", ["Squat", "Lunge", "Calf Raise"]),
            fenced=True,
        )
        stub_client.queue(first)
        response = generate(api_client, user_id, amount=3)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.text == first.replace("```json", "").replace("```", "").strip()
        assert "gender: female" in stub_client.prompts[0]

        stored = api_client.get("/get-user-workout", params={"userId": user_id}).json()
        assert [w["name"] for w in stored] == ["Push", "Pull", "Legs"]
        assert [e["name"] for e in stored[2]["excercises"]] == ["Squat", "Lunge", "Calf Raise"]
        assert set(stored[0]) == {"name", "excercises"}
        assert set(stored[0]["excercises"][0]) == {"name", "sets", "reps", "restTime", "videoLink"}
        assert stored == json.loads(response.text)

        stub_client.queue(make_workouts_json(("Full Body", ["Deadlift"])))
        response = generate(api_client, user_id, amount=1)
        assert response.status_code == 200

        stored = api_client.get("/get-user-workout", params={"userId": user_id}).json()
        assert stored == [
            {
                "name": "Full Body",
                "excercises": [
                    {
                        "name": "Deadlift",
                        "sets": 3,
                        "reps": 10,
                        "restTime": 60,
                        "videoLink": "deadlift",
                    }
                ],
            }
        ]

    def test_empty_generation_is_a_problem(self, api_client, stub_client):
        """Test an empty model reply fails and keeps the stored plan."""
        user_id = register(api_client)["userId"]
        stub_client.queue(make_workouts_json(("Push", ["Bench Press"])), "[]")
        generate(api_client, user_id, amount=1)

        response = generate(api_client, user_id, amount=1)

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/problem+json")
        assert response.json()["detail"] == "workout_plan_unparseable"
        stored = api_client.get("/get-user-workout", params={"userId": user_id}).json()
        assert [w["name"] for w in stored] == ["Push"]

    def test_oversized_count_is_unparseable(self, api_client, stub_client):
        """Test a count too large to store is reported as an unparseable plan."""
        user_id = register(api_client)["userId"]
        stub_client.queue(json.dumps([{"name": "Push", "excercises": [{"name": "Dip", "sets": 2**70}]}]))

        response = generate(api_client, user_id, amount=1)

        assert response.status_code == 500
        assert response.json()["detail"] == "workout_plan_unparseable"
        assert api_client.get("/get-user-workout", params={"userId": user_id}).json() == []

    def test_completion_failure_hides_details(self, api_client, stub_client):
        """Test provider errors map to an opaque 502."""
        user_id = register(api_client)["userId"]
        stub_client.queue(CompletionError("secret upstream detail"))

        response = generate(api_client, user_id, amount=2)

        assert response.status_code == 502
        assert response.json()["detail"] == "workout_generation_failed"
        assert "secret upstream detail" not in response.text

    def test_missing_parameter(self, api_client):
        """Test that generation parameters are required."""
        response = api_client.get("/workouts", params={"userId": 1})
        assert response.status_code == 422


class TestReplaceExercise:
    """Tests for GET /replace-exercise."""

    def test_returns_model_text(self, api_client, stub_client):
        """Test the cleaned model reply is returned as is."""
        stub_client.queue('```json\n{"name": "Incline Push-up", "sets": 3}\n```')

        response = api_client.get("/replace-exercise", params={"exerciseName": "Bench Press"})

        assert response.status_code == 200
        assert response.text == '{"name": "Incline Push-up", "sets": 3}'
        assert "Bench Press" in stub_client.prompts[0]

    def test_failure(self, api_client, stub_client):
        """Test provider errors map to an opaque 502."""
        stub_client.queue(CompletionError("timeout"))
        response = api_client.get("/replace-exercise", params={"exerciseName": "Squat"})
        assert response.status_code == 502
        assert response.json()["detail"] == "exercise_replacement_failed"


class TestProgress:
    """Tests for progress tracking endpoints."""

    def test_record_and_list(self, api_client):
        """Test recording a completed exercise and listing it."""
        user_id = register(api_client)["userId"]
        body = api_client.post("/progress", json={
            "userId": user_id,
            "exerciseName": "Squat",
            "sets": 5,
            "reps": 5,
            "weight": 100.0,
            "notes": "felt easy",
        }).json()
        assert body["success"] is True

        records = api_client.get("/progress", params={"userId": user_id}).json()
        assert len(records) == 1
        assert records[0]["exerciseName"] == "Squat"
        assert records[0]["notes"] == "felt easy"

    def test_requires_exercise_name(self, api_client):
        """Test recording without an exercise name."""
        user_id = register(api_client)["userId"]
        body = api_client.post("/progress", json={"userId": user_id}).json()
        assert body == {"success": False, "message": "Exercise name is required"}

    def test_unknown_user(self, api_client):
        """Test recording progress for a user that does not exist."""
        body = api_client.post("/progress", json={"userId": 7, "exerciseName": "Row"}).json()
        assert body == {"success": False, "message": "Unknown user"}


def test_health(api_client):
    """Test the health endpoint."""
    assert api_client.get("/health").json()["status"] == "healthy"


class TestCors:
    """Tests for cross-origin request handling."""

    PREFLIGHT_HEADERS = {
        "Origin": "http://x.test",
        "Access-Control-Request-Method": "POST",
        "Access-Control-Request-Headers": "content-type",
    }

    def test_allows_any_origin_by_default(self, api_client):
        """Test a preflight from any origin is accepted."""
        response = api_client.options("/login", headers=self.PREFLIGHT_HEADERS)
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_configured_origins(self, temp_db_path, stub_client):
        """Test only the configured origins pass the preflight."""
        app = create_app(
            settings=Settings(cors_origins=["http://a.test"]),
            db_path=temp_db_path,
            completion_client=stub_client,
        )
        with TestClient(app) as client:
            rejected = client.options("/login", headers=self.PREFLIGHT_HEADERS)
            allowed = client.options(
                "/login", headers={**self.PREFLIGHT_HEADERS, "Origin": "http://a.test"}
            )

        assert rejected.status_code == 400
        assert "access-control-allow-origin" not in rejected.headers
        assert allowed.status_code == 200
        assert allowed.headers["access-control-allow-origin"] == "http://a.test"
