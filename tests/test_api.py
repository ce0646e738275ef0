"""Tests for the per-user API endpoints."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from flexlog.api.app import create_app

HEADERS = {"X-Api-Token": "api-token"}


def _client(container) -> TestClient:
    return TestClient(create_app(container))


def test_health(container) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requires_token(container, user_id) -> None:
    client = _client(container)

    assert client.get(f"/users/{user_id}/logs").status_code == 401
    response = client.get(
        f"/users/{user_id}/logs", headers={"X-Api-Token": "wrong"}
    )
    assert response.status_code == 401


def test_save_and_get_daily_log(container, user_id) -> None:
    client = _client(container)

    saved = client.put(
        f"/users/{user_id}/logs/2024-03-06",
        headers=HEADERS,
        json={
            "protein": 150,
            "calories": 2000,
            "steps": 10000,
            "didLift": True,
            "sleepHours": 7.5,
        },
    )
    fetched = client.get(f"/users/{user_id}/logs/2024-03-06", headers=HEADERS)

    assert saved.status_code == 200
    body = fetched.json()
    assert body["date"] == "2024-03-06"
    assert body["scoreData"]["score"] == pytest.approx(8.25)
    assert body["scoreData"]["breakdown"]["activity"] == 1.1
    assert body["grade"]
    assert body["color"] == "#8BC34A"


def test_missing_log_is_not_found(container, user_id) -> None:
    client = _client(container)

    assert (
        client.get(f"/users/{user_id}/logs/2024-03-06", headers=HEADERS).status_code
        == 404
    )
    assert (
        client.get(
            f"/users/{user_id}/logs/2024-03-06/comparison", headers=HEADERS
        ).status_code
        == 404
    )


def test_comparison_and_averages(container, user_id) -> None:
    client = _client(container)
    client.put(
        f"/users/{user_id}/logs/2024-03-05", headers=HEADERS, json={"steps": 8000}
    )
    client.put(
        f"/users/{user_id}/logs/2024-03-06", headers=HEADERS, json={"steps": 10000}
    )

    comparison = client.get(
        f"/users/{user_id}/logs/2024-03-06/comparison", headers=HEADERS
    ).json()
    averages = client.get(f"/users/{user_id}/averages?days=2", headers=HEADERS).json()

    changes = {item["metric"]: item for item in comparison["comparisons"]}
    assert changes["steps"]["changePercent"] == 25.0
    assert changes["protein"]["changePercent"] is None
    assert averages["days"] == 2
    assert averages["sections"]["energy"] == 8.0
    assert set(averages) == {"days", "overall", "color", "sections"}


def test_trend_rejects_unknown_metric(container, user_id) -> None:
    response = _client(container).get(
        f"/users/{user_id}/trends/hydration", headers=HEADERS
    )

    assert response.status_code == 422


def test_trend_without_data_is_empty(container, user_id) -> None:
    response = _client(container).get(f"/users/{user_id}/trends/steps", headers=HEADERS)

    assert response.json() == {"metric": "steps", "points": []}


def test_workout_completes_goal_and_awards_badge(container, user_id) -> None:
    client = _client(container)
    today = datetime.now(UTC).date()

    goals = client.put(
        f"/users/{user_id}/goals", headers=HEADERS, json={"workouts": 1, "totalReps": 0}
    )
    created = client.post(
        f"/users/{user_id}/workouts/{today.isoformat()}",
        headers=HEADERS,
        json={"exercise": "Squat", "sets": 3, "reps": 5, "weight": 100},
    )
    progress = client.get(f"/users/{user_id}/goals/progress", headers=HEADERS).json()
    badges = client.get(f"/users/{user_id}/badges", headers=HEADERS).json()

    assert goals.json()["workouts"] == 1
    assert created.status_code == 201
    assert created.json()["workout"]["exercise"] == "Squat"
    assert [badge["name"] for badge in created.json()["badges"]] == ["Week 1 Goals"]
    assert progress["complete"] is True
    assert progress["consecutiveWeeks"] == 1
    assert progress["percentages"]["workouts"] == 100
    assert badges["badges"][0]["levelName"] == "Bronze"


def test_workout_payload_validation(container, user_id) -> None:
    response = _client(container).post(
        f"/users/{user_id}/workouts/2024-03-06",
        headers=HEADERS,
        json={"exercise": "Squat", "sets": 0, "reps": 5},
    )

    assert response.status_code == 422


def test_nutrition_and_exercise_lists(container, user_id) -> None:
    client = _client(container)
    day = (datetime.now(UTC) - timedelta(days=30)).date().isoformat()

    client.post(
        f"/users/{user_id}/nutrition/{day}",
        headers=HEADERS,
        json={"description": "Oats", "protein": 12, "calories": 350},
    )
    client.post(
        f"/users/{user_id}/workouts/{day}",
        headers=HEADERS,
        json={"exercise": "bench press", "sets": 3, "reps": 8},
    )

    entries = client.get(f"/users/{user_id}/nutrition/{day}", headers=HEADERS).json()
    exercises = client.get(f"/users/{user_id}/exercises", headers=HEADERS).json()

    assert entries["entries"][0]["description"] == "Oats"
    assert exercises == {"exercises": ["bench press"]}


def test_settings_roundtrip_and_invalid_timezone(container, user_id) -> None:
    client = _client(container)

    defaults = client.get(f"/users/{user_id}/settings", headers=HEADERS).json()
    saved = client.put(
        f"/users/{user_id}/settings",
        headers=HEADERS,
        json={"maintenance": 2500, "goal": "deficit", "timezone": "Europe/Oslo"},
    )
    invalid = client.put(
        f"/users/{user_id}/settings",
        headers=HEADERS,
        json={"timezone": "Mars/Olympus"},
    )

    assert defaults == {"maintenance": 2000, "goal": "maintenance", "timezone": "UTC"}
    assert saved.json()["timezone"] == "Europe/Oslo"
    assert invalid.status_code == 422
