import pytest

from duewise.application.use_cases.notifications import (
    TEST_NOTIFICATION,
    NoPushSubscriptionsError,
    send_test_notification,
)


def test_sends_to_every_device_without_history(store, sender):
    store.add_subscription(7, "https://push.example/phone")
    store.add_subscription(7, "https://push.example/laptop")
    sender.raising.add("https://push.example/laptop")

    counts = send_test_notification(store, sender, user_id=7)

    assert (counts.sent, counts.failed) == (1, 1)
    assert [message for _, message in sender.sent] == [TEST_NOTIFICATION] * 2
    assert store.notifications == []


def test_payload_uses_app_icons():
    assert TEST_NOTIFICATION.to_payload() == {
        "title": "Test notification",
        "body": "Your notifications are working!",
        "icon": "/pwa-192x192.png",
        "badge": "/favicon.png",
    }


def test_user_without_devices(store, sender):
    with pytest.raises(NoPushSubscriptionsError):
        send_test_notification(store, sender, user_id=7)
    assert sender.sent == []
