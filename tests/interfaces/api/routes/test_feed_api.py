"""Integration tests for the HTTP endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from chapterhub.config import Settings
from chapterhub.main import create_app


@pytest.fixture()
def client(tmp_path, push_client):
    """Return a test client bound to a clean application instance."""

    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'api.db'}",
        dispatch_enabled=False,
        feed_page_size=10,
    )
    app = create_app(settings, push_client=push_client)
    with TestClient(app) as test_client:
        yield test_client
    assert push_client.closed


def _iso(value: datetime) -> str:
    return value.isoformat()


def test_feed_lifecycle(client: TestClient) -> None:
    """Create items, read them through the cache, then delete one."""

    now = datetime.now(tz=timezone.utc)
    announcement = client.post(
        "/announcements",
        json={"author_id": "author-1", "title": "Welcome back", "description": "Semester kickoff"},
    )
    assert announcement.status_code == 201
    announcement_id = announcement.json()["id"]

    event = client.post(
        "/events",
        json={
            "author_id": "author-1",
            "title": "Kickoff dinner",
            "channel": "social",
            "start_date": _iso(now + timedelta(days=2)),
            "end_date": _iso(now + timedelta(days=2, hours=3)),
            "assigned_members": ["member-1"],
        },
    )
    assert event.status_code == 201
    event_id = event.json()["id"]

    feed = client.get("/feed")
    assert feed.status_code == 200
    body = feed.json()
    assert [item["id"] for item in body] == [event_id, announcement_id]
    assert body[0]["kind"] == "event"
    assert body[0]["assigned_members"] == ["member-1"]
    assert body[1]["kind"] == "announcement"

    update = client.patch(f"/items/announcements/{announcement_id}", json={"title": "Welcome!"})
    assert update.status_code == 200
    assert update.json()["title"] == "Welcome!"
    assert client.get("/feed").json()[1]["title"] == "Welcome back"

    assert client.delete(f"/items/event/{event_id}").status_code == 204
    assert [item["id"] for item in client.get("/feed").json()] == [announcement_id]


def test_feed_channel_and_kind_filters(client: TestClient) -> None:
    client.post(
        "/tasks",
        json={"author_id": "author-1", "title": "Sweep porch", "channel": "executive"},
    )
    client.post("/announcements", json={"author_id": "author-1", "title": "Hello"})

    executive = client.get(
        "/feed", params={"channels": ["executive"], "force_refresh": True}
    ).json()
    assert [item["title"] for item in executive] == ["Sweep porch"]

    announcements = client.get(
        "/feed", params={"kind": "announcement", "force_refresh": True}
    ).json()
    assert [item["title"] for item in announcements] == ["Hello"]


def test_events_and_tasks_endpoints(client: TestClient) -> None:
    start = datetime(2030, 5, 1, 18, 0, tzinfo=timezone.utc)
    client.post(
        "/events",
        json={
            "author_id": "author-1",
            "title": "Formal",
            "start_date": _iso(start),
            "end_date": _iso(start + timedelta(hours=4)),
        },
    )
    client.post(
        "/tasks",
        json={
            "author_id": "author-1",
            "title": "Buy decorations",
            "deadline": _iso(start - timedelta(days=1)),
            "assigned_members": ["member-1"],
        },
    )

    events = client.get(
        "/events",
        params={"start": _iso(start - timedelta(days=1)), "end": _iso(start + timedelta(days=1))},
    )
    assert events.status_code == 200
    assert [event["title"] for event in events.json()] == ["Formal"]

    inverted = client.get("/events", params={"start": _iso(start), "end": _iso(start - timedelta(days=1))})
    assert inverted.status_code == 400

    tasks = client.get("/users/member-1/tasks", params={"status": "pending"})
    assert [task["title"] for task in tasks.json()] == ["Buy decorations"]
    assert client.get("/users/member-2/tasks").json() == []

    assert client.post("/feed/cache/clear").status_code == 204


def test_item_errors(client: TestClient) -> None:
    assert client.delete("/items/polls/abc").status_code == 404
    assert client.delete("/items/task/missing").status_code == 404
    assert client.patch("/items/task/missing", json={"title": "x"}).status_code == 404

    created = client.post("/announcements", json={"author_id": "a", "title": "Hi"}).json()
    response = client.patch(f"/items/announcement/{created['id']}", json={"status": "completed"})
    assert response.status_code == 400

    invalid_event = client.post(
        "/events",
        json={
            "author_id": "a",
            "title": "Backwards",
            "start_date": "2030-01-02T00:00:00Z",
            "end_date": "2030-01-01T00:00:00Z",
        },
    )
    assert invalid_event.status_code == 422


def test_user_endpoints(client: TestClient) -> None:
    payload = {
        "id": "member-1",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "status": "Actif",
        "push_token": "ExponentPushToken[ada]",
    }
    response = client.post("/users/", json=payload)
    assert response.status_code == 201
    assert response.json()["created_at"] is not None

    assert client.post("/users/", json=payload).status_code == 409

    assert client.get("/users/member-1/full-name").json() == {
        "id": "member-1",
        "full_name": "Ada Lovelace",
    }
    assert client.get("/users/ghost/full-name").json()["full_name"] == "Unknown User"
    assert client.get("/users/ghost").status_code == 404

    update = client.patch("/users/member-1", json={"nickname": "Countess"})
    assert update.status_code == 200
    assert update.json()["nickname"] == "Countess"
    assert client.patch("/users/ghost", json={"nickname": "x"}).status_code == 404

    assert [user["id"] for user in client.get("/users/").json()] == ["member-1"]


def test_dispatch_endpoint_reports_sweep(client: TestClient, push_client) -> None:
    client.post(
        "/users/",
        json={
            "id": "member-1",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "push_token": "ExponentPushToken[ada]",
        },
    )
    start = datetime.now(tz=timezone.utc) + timedelta(minutes=31)
    client.post(
        "/events",
        json={
            "author_id": "author-1",
            "title": "Quick huddle",
            "start_date": _iso(start),
            "end_date": _iso(start + timedelta(hours=1)),
            "assigned_members": ["member-1"],
        },
    )

    report = client.post("/notifications/dispatch")
    assert report.status_code == 200
    assert report.json()["processed"] == 0
    assert push_client.sent == []


def test_events_accept_mixed_offset_bounds(client: TestClient) -> None:
    client.post(
        "/events",
        json={
            "author_id": "author-1",
            "title": "Midterm review",
            "start_date": "2024-03-10T18:00:00Z",
            "end_date": "2024-03-10T20:00:00Z",
        },
    )

    response = client.get(
        "/events",
        params={"start": "2024-03-01T00:00:00", "end": "2024-03-31T00:00:00Z"},
    )

    assert response.status_code == 200
    assert [event["title"] for event in response.json()] == ["Midterm review"]

    inverted = client.get(
        "/events",
        params={"start": "2024-03-31T00:00:00", "end": "2024-03-01T00:00:00Z"},
    )
    assert inverted.status_code == 400
