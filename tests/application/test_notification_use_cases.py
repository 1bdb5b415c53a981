"""Tests for the notification use cases."""

from __future__ import annotations

import pytest

from notifyhub.application.use_cases.notifications import (
    count_notifications,
    create_and_deliver,
    create_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from notifyhub.domain.exceptions import NotFoundError, ValidationError
from notifyhub.infrastructure.models import NotificationModel
from notifyhub.infrastructure.repositories import NotificationRepository
from tests.fakes import RecordingBroadcaster


@pytest.mark.parametrize(
    ("receiver_id", "type"),
    [(None, "chat"), ("", "chat"), ("u1", None), ("u1", "")],
)
def test_create_requires_receiver_and_type(db_session, receiver_id, type):
    with pytest.raises(ValidationError, match="receiverId, type"):
        create_notification(db_session, receiver_id=receiver_id, type=type)

    assert db_session.query(NotificationModel).count() == 0


def test_create_applies_defaults(db_session):
    notification = create_notification(db_session, receiver_id="u1", type="chat", channel="")

    assert notification.read is False
    assert notification.channel == "default"
    assert notification.payload == {}
    assert notification.app_id is None
    assert notification.created_at == notification.updated_at


@pytest.mark.parametrize("app_id", [None, ""])
def test_reads_and_bulk_updates_require_app_id(db_session, app_id):
    with pytest.raises(ValidationError, match="appId"):
        list_notifications(db_session, "u1", app_id=app_id)
    with pytest.raises(ValidationError, match="appId"):
        count_notifications(db_session, "u1", app_id=app_id)
    with pytest.raises(ValidationError, match="appId"):
        mark_all_notifications_read(db_session, "u1", app_id=app_id)


def test_notifications_without_app_id_are_not_listed(db_session):
    create_notification(db_session, receiver_id="u1", type="chat")
    create_notification(db_session, receiver_id="u1", type="chat", app_id="Y")
    scoped = create_notification(db_session, receiver_id="u1", type="chat", app_id="X")

    listed = list_notifications(db_session, "u1", app_id="X")

    assert [n.id for n in listed] == [scoped.id]


def test_mark_read_unknown_notification(db_session):
    with pytest.raises(NotFoundError):
        mark_notification_read(db_session, "missing")


def test_mark_read_never_reverts(db_session):
    created = create_notification(db_session, receiver_id="u1", type="chat", app_id="app1")

    mark_notification_read(db_session, created.id)
    again = mark_notification_read(db_session, created.id)
    mark_all_notifications_read(db_session, "u1", app_id="app1")

    assert again.read is True
    assert count_notifications(db_session, "u1", app_id="app1", read=False) == 0


def test_create_and_deliver_persists_before_pushing(db_session):
    seen_in_store: list[bool] = []

    def check_store(receiver_id, event):
        seen_in_store.append(NotificationRepository(db_session).get(event["id"]) is not None)

    broadcaster = RecordingBroadcaster(online=True, on_push=check_store)

    result = create_and_deliver(
        db_session,
        broadcaster,
        receiver_id="u1",
        type="order",
        payload={"orderId": 9},
        app_id="app1",
        sender_id="shop-1",
    )

    assert seen_in_store == [True]
    assert result.delivered is True
    receiver_id, event = broadcaster.pushed[0]
    assert receiver_id == "u1"
    assert event["id"] == result.notification.id
    assert event["payload"] == {"orderId": 9}
    assert event["senderId"] == "shop-1"
    assert "receiverId" not in event and "appId" not in event


def test_create_and_deliver_offline_receiver_keeps_history(db_session):
    broadcaster = RecordingBroadcaster(online=False)

    result = create_and_deliver(
        db_session, broadcaster, receiver_id="u1", type="chat", app_id="app1"
    )

    assert result.delivered is False
    listed = list_notifications(db_session, "u1", app_id="app1")
    assert [n.id for n in listed] == [result.notification.id]


def test_create_and_deliver_validation_skips_push(db_session):
    broadcaster = RecordingBroadcaster(online=True)

    with pytest.raises(ValidationError):
        create_and_deliver(db_session, broadcaster, receiver_id="", type="chat")

    assert broadcaster.pushed == []
