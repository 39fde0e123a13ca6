"""Deliver Web Push messages through ``pywebpush``.

Payload encryption (aes128gcm) and VAPID signing are handled entirely by the
library; this module only maps its outcomes onto :class:`PushDeliveryResult`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pywebpush import WebPushException, webpush

from duewise.config import Settings, get_settings
from duewise.domain.entities import PushDeliveryResult, PushMessage, PushSubscription

logger = logging.getLogger(__name__)

# Statuses meaning the subscription will never accept messages again.
_GONE_STATUS_CODES = frozenset({404, 410})


class PushConfigurationError(RuntimeError):
    """Raised when the VAPID credentials needed to sign pushes are missing."""


def _response_details(response: Any) -> str | None:
    """Return a short description of a push service error response."""

    if response is None:
        return None
    text = getattr(response, "text", None)
    if isinstance(text, str) and text.strip():
        return text.strip()[:500]
    return None


def _log_webpush_exception(exc: WebPushException, subscription: PushSubscription) -> None:
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    details = _response_details(response)

    if status_code in _GONE_STATUS_CODES:
        logger.warning(
            "Push subscription %s of user %s is gone (status %s)",
            subscription.id,
            subscription.user_id,
            status_code,
        )
    elif status_code and details:
        logger.error(
            "Push service rejected message with status %s: %s", status_code, details
        )
    elif status_code:
        logger.error("Push service rejected message with status %s", status_code)
    else:
        logger.error("Error sending push notification: %s", exc)


class WebPushSender:
    """Send :class:`PushMessage` objects to browser push services."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        if not settings.push_configured:
            raise PushConfigurationError("VAPID keys not configured")
        self._private_key = settings.vapid_private_key
        self._subject = settings.vapid_subject
        self._timeout = settings.push_timeout_seconds

    def send(
        self, subscription: PushSubscription, message: PushMessage
    ) -> PushDeliveryResult:
        try:
            response = webpush(
                subscription_info=subscription.subscription_info(),
                data=json.dumps(message.to_payload()),
                vapid_private_key=self._private_key,
                # pywebpush adds "aud" and "exp" to the claims it receives.
                vapid_claims={"sub": self._subject},
                timeout=self._timeout,
            )
        except WebPushException as exc:
            _log_webpush_exception(exc, subscription)
            status_code = getattr(getattr(exc, "response", None), "status_code", None)
            return PushDeliveryResult(
                success=False,
                status_code=status_code,
                expired=status_code in _GONE_STATUS_CODES,
                error=str(exc),
            )
        except Exception as exc:  # network failures and malformed keys
            logger.exception(
                "Error sending push notification to subscription %s", subscription.id
            )
            return PushDeliveryResult(success=False, error=str(exc))

        return PushDeliveryResult(
            success=True, status_code=getattr(response, "status_code", None)
        )


__all__ = ["PushConfigurationError", "WebPushSender"]
