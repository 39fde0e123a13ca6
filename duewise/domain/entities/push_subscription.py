"""Domain entity representing a Web Push endpoint registered by a browser."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class PushSubscription:
    """Push destination of one device, unique per ``(user_id, endpoint)``.

    ``p256dh`` and ``auth`` are opaque keys handed through to the push
    transport.
    """

    id: int | None
    user_id: int
    endpoint: str
    p256dh: str
    auth: str
    created_at: datetime | None = None

    def subscription_info(self) -> dict[str, Any]:
        """Return the structure expected by ``pywebpush.webpush``."""

        return {
            "endpoint": self.endpoint,
            "keys": {"p256dh": self.p256dh, "auth": self.auth},
        }


@dataclass(frozen=True)
class PushMessage:
    """Payload shown by the service worker."""

    title: str
    body: str
    icon: str = "/favicon.ico"
    badge: str = "/favicon.ico"

    def to_payload(self) -> dict[str, str]:
        return {
            "title": self.title,
            "body": self.body,
            "icon": self.icon,
            "badge": self.badge,
        }


@dataclass(frozen=True)
class PushDeliveryResult:
    """Outcome of a single delivery attempt."""

    success: bool
    status_code: int | None = None
    expired: bool = False
    error: str | None = None


__all__ = ["PushDeliveryResult", "PushMessage", "PushSubscription"]
