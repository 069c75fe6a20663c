"""Tests for calculator endpoints."""

from fastapi.testclient import TestClient

from fitin.api.app import create_app
from fitin.containers import AppContainer


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_calories_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/calculator/calories",
        json={
            "height": 180,
            "weight": 80,
            "age": 30,
            "gender": "male",
            "activity_level": "moderately_active",
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "maintenance_calories": 2759,
        "cut_calories": 2207,
        "bulk_calories": 3173,
        "protein_grams": 160,
        "carbs_grams": 357,
        "fat_grams": 77,
    }


def test_calories_endpoint_rejects_out_of_range(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/calculator/calories",
        json={
            "height": 180,
            "weight": 350,
            "age": 30,
            "gender": "male",
            "activity_level": "moderately_active",
        },
    )

    assert response.status_code == 422
    assert response.json() == {
        "detail": {"field": "weight", "message": "Weight must be less than 300 kg"}
    }


def test_goal_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/calculator/goal", params={"maintenance": 2500, "goal": "cut"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "calories": 2000,
        "protein": 150,
        "carbs": 225,
        "fat": 56,
    }


def test_goal_endpoint_rejects_unknown_goal(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/calculator/goal", params={"maintenance": 2500, "goal": "recomp"}
    )

    assert response.status_code == 422


def test_goal_endpoint_rejects_non_finite_maintenance(
    container: AppContainer,
) -> None:
    client = TestClient(create_app(container))

    for value in ("nan", "inf", "-inf"):
        response = client.get(
            "/calculator/goal", params={"maintenance": value, "goal": "cut"}
        )
        assert response.status_code == 422


def test_goal_endpoint_rejects_fractional_maintenance(
    container: AppContainer,
) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/calculator/goal", params={"maintenance": "2500.4", "goal": "maintain"}
    )

    assert response.status_code == 422
