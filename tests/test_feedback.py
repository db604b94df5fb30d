import pytest
from fastapi.testclient import TestClient

from drivedesk.app.db.base import Base
from drivedesk.app.db.session import SessionLocal, engine
from drivedesk.app.main import app
from drivedesk.app.services.feedback import list_feedback_for_lesson


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def login(client: TestClient, email: str) -> str:
    response = client.post("/api/login", json={"email": email, "password": "password"})
    assert response.status_code == 200
    return response.json()["token"]


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def booked_lesson(client: TestClient) -> dict:
    token = login(client, "candidate1@example.com")
    response = client.post(
        "/api/lessons",
        json={"instructorId": 2, "date": "2025-11-20", "time": "11:00"},
        headers=auth(token),
    )
    assert response.status_code == 201
    return response.json()


def test_feedback_completes_lesson_and_is_stored():
    client = TestClient(app)
    lesson = booked_lesson(client)
    response = client.post(
        f"/api/lessons/{lesson['id']}/feedback",
        json={"rating": 4, "comments": "Good mirror checks"},
        headers=auth(login(client, "instructor1@example.com")),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["lesson"]["status"] == "COMPLETED"
    assert data["feedback"] == {
        "id": 1,
        "lessonId": lesson["id"],
        "instructorId": 2,
        "rating": 4,
        "comments": "Good mirror checks",
    }


def test_feedback_defaults_rating_and_comments():
    client = TestClient(app)
    lesson = booked_lesson(client)
    response = client.post(
        f"/api/lessons/{lesson['id']}/feedback",
        json={},
        headers=auth(login(client, "instructor1@example.com")),
    )
    assert response.status_code == 201
    assert response.json()["feedback"]["rating"] == 5
    assert response.json()["feedback"]["comments"] == ""


def test_feedback_without_body_uses_defaults():
    client = TestClient(app)
    lesson = booked_lesson(client)
    response = client.post(
        f"/api/lessons/{lesson['id']}/feedback",
        headers=auth(login(client, "instructor1@example.com")),
    )
    assert response.status_code == 201
    assert response.json()["feedback"]["rating"] == 5


def test_rating_range_is_not_enforced():
    client = TestClient(app)
    lesson = booked_lesson(client)
    response = client.post(
        f"/api/lessons/{lesson['id']}/feedback",
        json={"rating": 11},
        headers=auth(login(client, "instructor1@example.com")),
    )
    assert response.status_code == 201
    assert response.json()["feedback"]["rating"] == 11


def test_multiple_feedback_entries_are_kept():
    client = TestClient(app)
    lesson = booked_lesson(client)
    instructor = login(client, "instructor1@example.com")
    for rating in (3, 5):
        response = client.post(
            f"/api/lessons/{lesson['id']}/feedback", json={"rating": rating}, headers=auth(instructor)
        )
        assert response.status_code == 201

    db = SessionLocal()
    entries = list_feedback_for_lesson(db, lesson["id"])
    db.close()
    assert [entry.rating for entry in entries] == [3, 5]
    assert [entry.id for entry in entries] == [1, 2]


def test_feedback_on_other_instructors_lesson_is_forbidden(directory):
    client = TestClient(app)
    lesson = booked_lesson(client)
    response = client.post(
        f"/api/lessons/{lesson['id']}/feedback",
        json={"rating": 2},
        headers=auth(login(client, "instructor2@example.com")),
    )
    assert response.status_code == 403
    assert response.json() == {"error": "You can only give feedback for your own lessons"}


def test_feedback_on_missing_lesson_returns_404():
    client = TestClient(app)
    response = client.post(
        "/api/lessons/404/feedback",
        json={"rating": 2},
        headers=auth(login(client, "instructor1@example.com")),
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Lesson not found"}


def test_admin_cannot_submit_feedback():
    client = TestClient(app)
    lesson = booked_lesson(client)
    response = client.post(
        f"/api/lessons/{lesson['id']}/feedback",
        json={"rating": 2},
        headers=auth(login(client, "admin1@example.com")),
    )
    assert response.status_code == 403


def test_explicit_zero_rating_is_kept():
    client = TestClient(app)
    lesson = booked_lesson(client)
    response = client.post(
        f"/api/lessons/{lesson['id']}/feedback",
        json={"rating": 0},
        headers=auth(login(client, "instructor1@example.com")),
    )
    assert response.status_code == 201
    assert response.json()["feedback"]["rating"] == 0


def test_feedback_list_for_unknown_lesson_is_empty():
    db = SessionLocal()
    assert list_feedback_for_lesson(db, 404) == []
    db.close()
