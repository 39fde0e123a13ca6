"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    ids: list[int] = Field(..., min_length=1, description="Notification identifiers")


class NotificationMarkReadResponse(BaseModel):
    updated: int


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    title: str
    message: str
    is_read: bool
    fixed_account_id: int | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class DueReminderSweepRead(BaseModel):
    """Counters returned to the scheduler after a sweep."""

    success: bool = True
    bills_checked: int
    bills_selected: int
    notifications_sent: int
    deliveries_failed: int = 0
    records_created: int = 0
    reminders_deduplicated: int = 0
    owners_without_subscriptions: int = 0
    owners_failed: int = 0
    subscriptions_pruned: int = 0

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class NotificationCheckRead(BaseModel):
    message: str = "Test notification sent"
    sent: int
    failed: int


__all__ = [
    "DueReminderSweepRead",
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "NotificationCheckRead",
]
