"""Integration tests for the notification HTTP endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from notifyhub.config import Settings


def _create(client: TestClient, **body) -> dict:
    response = client.post("/api/notifications", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_health_check(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.parametrize(
    "body",
    [{"type": "chat"}, {"receiverId": "u1"}, {"receiverId": "", "type": "chat"}, {}],
)
def test_create_requires_receiver_and_type(client: TestClient, body: dict) -> None:
    response = client.post("/api/notifications", json=body)

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: receiverId, type"


def test_create_without_live_sessions_is_stored_but_not_delivered(client: TestClient) -> None:
    created = _create(client, receiverId="u1", type="order", appId="app1", payload={"orderId": 42})

    assert created["success"] is True
    assert created["delivered"] is False
    notification = created["notification"]
    assert notification["read"] is False
    assert notification["channel"] == "default"
    assert notification["payload"] == {"orderId": 42}
    assert notification["senderId"] is None

    history = client.get("/api/notifications/u1", params={"appId": "app1"}).json()
    assert [n["id"] for n in history["notifications"]] == [notification["id"]]
    assert history["isOnline"] is False


def test_list_requires_app_id(client: TestClient) -> None:
    response = client.get("/api/notifications/u1")

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required query parameter: appId"


def test_list_filters_paginates_and_counts_whole_scope(client: TestClient) -> None:
    first = _create(client, receiverId="u1", type="chat", appId="app1", channel="inbox")
    _create(client, receiverId="u1", type="order", appId="app1")
    third = _create(client, receiverId="u1", type="chat", appId="app1")
    _create(client, receiverId="u1", type="chat", appId="other")
    _create(client, receiverId="u1", type="chat")
    client.patch(f"/api/notifications/{first['notification']['id']}/read")

    chats = client.get(
        "/api/notifications/u1", params={"appId": "app1", "type": "chat"}
    ).json()
    assert [n["id"] for n in chats["notifications"]] == [
        third["notification"]["id"],
        first["notification"]["id"],
    ]
    assert chats["total"] == 3
    assert chats["unreadCount"] == 2

    unread_inbox = client.get(
        "/api/notifications/u1",
        params={"appId": "app1", "channel": "inbox", "unreadOnly": "true"},
    ).json()
    assert unread_inbox["notifications"] == []

    page = client.get(
        "/api/notifications/u1", params={"appId": "app1", "limit": 1, "skip": 1}
    ).json()
    assert len(page["notifications"]) == 1
    assert page["notifications"][0]["type"] == "order"


def test_mark_read_unknown_notification(client: TestClient) -> None:
    response = client.patch("/api/notifications/unknown/read")

    assert response.status_code == 404
    assert response.json()["detail"] == "Notification not found"


def test_mark_all_read_requires_app_id(client: TestClient) -> None:
    response = client.patch("/api/notifications/u1/read-all")

    assert response.status_code == 400


def test_mark_all_read_is_scoped_and_idempotent(client: TestClient) -> None:
    _create(client, receiverId="u1", type="order", appId="app1")
    _create(client, receiverId="u1", type="chat", appId="app1")
    _create(client, receiverId="u1", type="order", appId="app2")

    first = client.patch(
        "/api/notifications/u1/read-all", params={"appId": "app1", "type": "order"}
    )
    second = client.patch(
        "/api/notifications/u1/read-all", params={"appId": "app1", "type": "order"}
    )

    assert first.json() == {"success": True, "modifiedCount": 1}
    assert second.json() == {"success": True, "modifiedCount": 0}
    app1 = client.get("/api/notifications/u1", params={"appId": "app1"}).json()
    app2 = client.get("/api/notifications/u1", params={"appId": "app2"}).json()
    assert app1["unreadCount"] == 1
    assert app2["unreadCount"] == 1


def test_unknown_route_is_not_found(client: TestClient) -> None:
    assert client.get("/api/unknown").status_code == 404


def test_api_key_is_enforced_when_configured(tmp_path) -> None:
    from main import create_app

    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'secured.db'}", api_key="s3cret"
    )
    with TestClient(create_app(settings)) as client:
        missing = client.get("/api/notifications/u1", params={"appId": "app1"})
        wrong = client.get(
            "/api/notifications/u1",
            params={"appId": "app1"},
            headers={"X-API-Key": "nope"},
        )
        allowed = client.get(
            "/api/notifications/u1",
            params={"appId": "app1"},
            headers={"X-API-Key": "s3cret"},
        )
        health = client.get("/health")

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert allowed.status_code == 200
    assert health.status_code == 200


def test_timestamps_follow_the_configured_timezone(tmp_path) -> None:
    from main import create_app

    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'tokyo.db'}", app_timezone="Asia/Tokyo"
    )
    with TestClient(create_app(settings)) as tokyo_client:
        created = _create(tokyo_client, receiverId="u1", type="chat", appId="app1")
        listed = tokyo_client.get("/api/notifications/u1", params={"appId": "app1"}).json()

    assert created["notification"]["createdAt"].endswith("+09:00")
    assert listed["notifications"][0]["createdAt"] == created["notification"]["createdAt"]
