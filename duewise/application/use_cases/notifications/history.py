"""Use cases for reading the notification history."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from duewise.domain.entities import Notification
from duewise.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    *,
    user_id: int,
    unread_only: bool = False,
    limit: int | None = 50,
) -> Sequence[Notification]:
    """Return the most recent notifications of ``user_id``."""

    repository = NotificationRepository(session)
    if unread_only:
        return repository.list_unread_for_user(user_id, limit=limit)
    return repository.list_for_user(user_id, limit=limit)


def mark_notifications_read(
    session: Session, notification_ids: Iterable[int], *, user_id: int
) -> int:
    """Mark the given notifications of ``user_id`` as read; return how many changed."""

    unique_ids = list(dict.fromkeys(notification_ids))
    return NotificationRepository(session).mark_as_read(unique_ids, user_id=user_id)
