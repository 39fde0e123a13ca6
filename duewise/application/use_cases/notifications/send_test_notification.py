"""Use case for sending a sample push to every device of a user."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from duewise.application.ports import PushSender, ReminderStore
from duewise.domain.entities import PushMessage

from .due_reminders import deliver_to_all

logger = logging.getLogger(__name__)

TEST_NOTIFICATION = PushMessage(
    title="Test notification",
    body="Your notifications are working!",
    icon="/pwa-192x192.png",
    badge="/favicon.png",
)


class NoPushSubscriptionsError(LookupError):
    """Raised when the user has not enabled notifications on any device."""


@dataclass(frozen=True)
class DeliveryCounts:
    sent: int
    failed: int


def send_test_notification(
    store: ReminderStore,
    sender: PushSender,
    *,
    user_id: int,
    max_workers: int = 1,
) -> DeliveryCounts:
    """Deliver :data:`TEST_NOTIFICATION` to all subscriptions of ``user_id``.

    Nothing is written to the notification history.
    """

    subscriptions = list(store.list_push_subscriptions(user_id))
    if not subscriptions:
        raise NoPushSubscriptionsError("No push subscriptions found")

    outcomes = deliver_to_all(
        sender, subscriptions, TEST_NOTIFICATION, max_workers=max_workers
    )
    sent = sum(1 for outcome in outcomes if outcome.success)
    counts = DeliveryCounts(sent=sent, failed=len(outcomes) - sent)
    logger.info(
        "Test notification for user %s: %s sent, %s failed",
        user_id,
        counts.sent,
        counts.failed,
    )
    return counts


__all__ = [
    "TEST_NOTIFICATION",
    "DeliveryCounts",
    "NoPushSubscriptionsError",
    "send_test_notification",
]
