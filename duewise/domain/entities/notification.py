"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Notification:
    """History entry for a message sent to a user.

    One entry is written per logical notification, not per delivery attempt.
    """

    id: int | None
    user_id: int
    title: str
    message: str
    is_read: bool = False
    fixed_account_id: int | None = None
    reminder_key: str | None = None
    created_at: datetime | None = None


__all__ = ["Notification"]
