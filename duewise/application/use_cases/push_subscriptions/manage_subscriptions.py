"""Register and remove Web Push subscriptions."""

from sqlalchemy.orm import Session

from duewise.domain.entities import PushSubscription
from duewise.infrastructure.repositories import PushSubscriptionRepository


def register_push_subscription(
    session: Session, *, user_id: int, endpoint: str, p256dh: str, auth: str
) -> PushSubscription:
    """Save the subscription of a device, overwriting the keys of a known endpoint."""

    if not endpoint.startswith("https://"):
        raise ValueError("Push endpoint must be an https URL")
    subscription = PushSubscription(
        id=None, user_id=user_id, endpoint=endpoint, p256dh=p256dh, auth=auth
    )
    return PushSubscriptionRepository(session).upsert(subscription)


def remove_push_subscription(session: Session, *, user_id: int, endpoint: str) -> None:
    if not PushSubscriptionRepository(session).delete(user_id=user_id, endpoint=endpoint):
        raise ValueError("Push subscription not found")
