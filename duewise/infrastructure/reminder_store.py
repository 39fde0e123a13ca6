"""SQL implementation of the storage port used by the reminder use cases."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from duewise.domain.entities import FixedAccount, Notification, PushSubscription
from duewise.infrastructure.repositories import (
    FixedAccountRepository,
    NotificationRepository,
    PushSubscriptionRepository,
)


class SqlReminderStore:
    """Serve reminder queries from the application database."""

    def __init__(self, session: Session) -> None:
        self._fixed_accounts = FixedAccountRepository(session)
        self._notifications = NotificationRepository(session)
        self._subscriptions = PushSubscriptionRepository(session)

    def list_active_fixed_accounts(self) -> Sequence[FixedAccount]:
        return self._fixed_accounts.list_active()

    def list_push_subscriptions(self, user_id: int) -> Sequence[PushSubscription]:
        return self._subscriptions.list_for_user(user_id)

    def record_notification(self, notification: Notification) -> Notification | None:
        try:
            return self._notifications.create(notification)
        except IntegrityError:
            if notification.reminder_key is None:
                raise
            return None

    def remove_push_subscription(self, subscription: PushSubscription) -> None:
        self._subscriptions.delete(
            user_id=subscription.user_id, endpoint=subscription.endpoint
        )


__all__ = ["SqlReminderStore"]
