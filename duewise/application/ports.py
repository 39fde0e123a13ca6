"""Collaborators the reminder use cases depend on.

The SQL-backed implementations live in the infrastructure layer; tests
substitute in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from duewise.domain.entities import (
    FixedAccount,
    Notification,
    PushDeliveryResult,
    PushMessage,
    PushSubscription,
)


class ReminderStore(Protocol):
    """Storage queries used while dispatching reminders."""

    def list_active_fixed_accounts(self) -> Sequence[FixedAccount]:
        """Return every active bill of every user."""

    def list_push_subscriptions(self, user_id: int) -> Sequence[PushSubscription]:
        """Return the push endpoints registered by ``user_id``."""

    def record_notification(self, notification: Notification) -> Notification | None:
        """Persist ``notification``.

        Returns ``None`` when its ``reminder_key`` was already recorded.
        """

    def remove_push_subscription(self, subscription: PushSubscription) -> None:
        """Forget an endpoint the push service no longer accepts."""


class PushSender(Protocol):
    """Transport able to deliver an encrypted, signed Web Push message."""

    def send(
        self, subscription: PushSubscription, message: PushMessage
    ) -> PushDeliveryResult:
        """Deliver ``message`` to ``subscription`` and report the outcome."""


__all__ = ["PushSender", "ReminderStore"]
